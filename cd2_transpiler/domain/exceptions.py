class ConversionError(Exception):
    pass


class MalformedInputError(ConversionError):
    pass


class MissingRequiredFieldError(ConversionError):
    def __init__(self, field: str, destination: str | None = None) -> None:
        self.field = field
        self.destination = destination
        target = f" (needed for {destination})" if destination else ""
        super().__init__(f"Required field [{field}] is missing{target}")


class UnsupportedMultilineNameError(ConversionError):
    def __init__(self, field: str = "Name") -> None:
        self.field = field
        super().__init__(
            f"Field [{field}] contains a line break. Multiline names are not "
            "supported, put the extra text in the Description instead."
        )


class UnknownFieldError(ConversionError):
    def __init__(self, field: str, location: str = "document") -> None:
        self.field = field
        self.location = location
        super().__init__(f"Unsupported field [{field}] in {location}")
