class NotFoundError(LookupError):
    """Raised when an employee, company, slip or line item id does not exist."""

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key
