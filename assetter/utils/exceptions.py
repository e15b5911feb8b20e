"""
Custom exceptions for the asset manager
Centralised exception handling for better error management
"""


class AssetterError(Exception):
    """Base exception for all asset manager errors"""
    pass


class ConfigurationError(AssetterError):
    """Raised when configuration is invalid or missing"""
    pass


class UnknownAssetError(AssetterError):
    """Raised in strict mode when a requested asset name is not registered"""
    def __init__(self, message: str, name: str = None, required_by: str = None):
        super().__init__(message)
        self.name = name
        self.required_by = required_by


class FileAccessError(AssetterError):
    """Raised when an asset file cannot be read for hashing"""
    def __init__(self, message: str, path: str = None, original_error: Exception = None):
        super().__init__(message)
        self.path = path
        self.original_error = original_error


class RenderingError(AssetterError):
    """Raised when output rendering is misconfigured"""
    def __init__(self, message: str, output_format: str = None):
        super().__init__(message)
        self.output_format = output_format
