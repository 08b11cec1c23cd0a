import uuid


class IdentifierGenerator:
    """Produces record identifiers from a large random space.

    Identifiers are random UUID4 values drawn from the OS CSPRNG, so
    independent processes can generate them without coordination.
    """

    def next(self) -> str:
        return str(uuid.uuid4())
