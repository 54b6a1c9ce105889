"""Content types and file extensions defined by OPC and commonly found in packages."""
from __future__ import annotations

from typing_extensions import Final

__all__ = ('CORE_PROPERTIES_PART', 'CUSTOM_XML_PART', 'DIGITAL_SIGNATURE_CERTIFICATE_PART',
           'DIGITAL_SIGNATURE_ORIGIN_PART', 'DIGITAL_SIGNATURE_XML_SIGNATURE_PART',
           'EXTENSION_BMP', 'EXTENSION_GIF', 'EXTENSION_JPG_1', 'EXTENSION_JPG_2',
           'EXTENSION_PICT', 'EXTENSION_PNG', 'EXTENSION_TIFF', 'EXTENSION_XML', 'EXTENSION_X_EMF',
           'EXTENSION_X_WMF', 'EXTENSIONS', 'IMAGE_BMP', 'IMAGE_GIF', 'IMAGE_JPEG', 'IMAGE_PICT',
           'IMAGE_PNG', 'IMAGE_TIFF', 'IMAGE_X_EMF', 'IMAGE_X_WMF', 'PLAIN_OLD_XML',
           'RELATIONSHIPS_PART', 'WELL_KNOWN', 'XML')

CORE_PROPERTIES_PART: Final = 'application/vnd.openxmlformats-package.core-properties+xml'
CUSTOM_XML_PART: Final = 'application/vnd.openxmlformats-officedocument.customXmlProperties+xml'
DIGITAL_SIGNATURE_CERTIFICATE_PART: Final = (
    'application/vnd.openxmlformats-package.digital-signature-certificate')
DIGITAL_SIGNATURE_ORIGIN_PART: Final = (
    'application/vnd.openxmlformats-package.digital-signature-origin')
DIGITAL_SIGNATURE_XML_SIGNATURE_PART: Final = (
    'application/vnd.openxmlformats-package.digital-signature-xmlsignature+xml')
RELATIONSHIPS_PART: Final = 'application/vnd.openxmlformats-package.relationships+xml'
PLAIN_OLD_XML: Final = 'application/xml'
XML: Final = 'text/xml'

IMAGE_BMP: Final = 'image/bmp'
IMAGE_GIF: Final = 'image/gif'
IMAGE_JPEG: Final = 'image/jpeg'
IMAGE_PICT: Final = 'image/pict'
IMAGE_PNG: Final = 'image/png'
IMAGE_TIFF: Final = 'image/tiff'
IMAGE_X_EMF: Final = 'image/x-emf'
IMAGE_X_WMF: Final = 'image/x-wmf'

EXTENSION_BMP: Final = 'bmp'
EXTENSION_GIF: Final = 'gif'
EXTENSION_JPG_1: Final = 'jpg'
EXTENSION_JPG_2: Final = 'jpeg'
EXTENSION_PICT: Final = 'pict'
EXTENSION_PNG: Final = 'png'
EXTENSION_TIFF: Final = 'tiff'
EXTENSION_XML: Final = 'xml'
EXTENSION_X_EMF: Final = 'emf'
EXTENSION_X_WMF: Final = 'wmf'

EXTENSIONS: Final = {
    EXTENSION_BMP: IMAGE_BMP,
    EXTENSION_GIF: IMAGE_GIF,
    EXTENSION_JPG_1: IMAGE_JPEG,
    EXTENSION_JPG_2: IMAGE_JPEG,
    EXTENSION_PICT: IMAGE_PICT,
    'pct': IMAGE_PICT,
    EXTENSION_PNG: IMAGE_PNG,
    EXTENSION_TIFF: IMAGE_TIFF,
    'tif': IMAGE_TIFF,
    EXTENSION_XML: XML,
    EXTENSION_X_EMF: IMAGE_X_EMF,
    EXTENSION_X_WMF: IMAGE_X_WMF,
}
"""Lower case file extension (without the dot) to content type."""
WELL_KNOWN: Final = frozenset({
    CORE_PROPERTIES_PART, CUSTOM_XML_PART, DIGITAL_SIGNATURE_CERTIFICATE_PART,
    DIGITAL_SIGNATURE_ORIGIN_PART, DIGITAL_SIGNATURE_XML_SIGNATURE_PART, RELATIONSHIPS_PART,
    PLAIN_OLD_XML, XML, *EXTENSIONS.values()
})
