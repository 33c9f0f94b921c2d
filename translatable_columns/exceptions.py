class AttributeNotTranslatable(Exception):
    """Ключ не входит в translatable_keys модели."""

    def __init__(self, message, key=None, translatable_keys=()):
        super().__init__(message)
        self.key = key
        self.translatable_keys = list(translatable_keys)

    @classmethod
    def make(cls, key: str, translatable_keys) -> "AttributeNotTranslatable":
        keys = list(translatable_keys)
        return cls(
            f"Cannot translate attribute `{key}` as it's not one of the "
            f"translatable attributes: `{', '.join(keys)}`",
            key=key,
            translatable_keys=keys,
        )
