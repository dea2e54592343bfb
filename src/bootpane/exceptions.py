class InvalidConfigError(ValueError):
    """Widget was configured incorrectly."""


class MissingHeaderError(InvalidConfigError):
    """Tab item has no header."""

    def __init__(self) -> None:
        super().__init__("The 'header' option is required.")


class MissingContentError(InvalidConfigError):
    """Tab item has neither content nor nested items."""

    def __init__(self) -> None:
        super().__init__("The 'content' option is required.")


class UnknownAssetBundleError(InvalidConfigError):
    """Asset bundle name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown asset bundle: {name}")
        self.name = name
