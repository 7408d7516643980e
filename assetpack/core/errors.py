"""Exceptions raised by assetpack."""


class AssetPackError(RuntimeError):
    pass


class CompressionError(AssetPackError):
    pass


class FetchError(AssetPackError):
    pass


class ManifestError(AssetPackError):
    pass


class UnknownPackageError(AssetPackError):
    pass
