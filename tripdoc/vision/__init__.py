from tripdoc.vision.client_base import BaseVisionClient
from tripdoc.vision.factory import ImageOcrExtractorFactory
from tripdoc.vision.image_extractor import ImageOcrExtractor

__all__ = ["BaseVisionClient", "ImageOcrExtractor", "ImageOcrExtractorFactory"]
