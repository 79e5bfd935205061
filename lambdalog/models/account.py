import dataclasses


@dataclasses.dataclass(frozen=True)
class AccountContext:
    """An AWS profile and the region whose functions are browsed"""

    name: str
    region: str

    @property
    def label(self) -> str:
        """Get the display label of the context"""
        return f"{self.name} ({self.region})"
