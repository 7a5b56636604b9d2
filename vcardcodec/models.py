from dataclasses import dataclass


@dataclass(frozen=True)
class CardContext:
    """Settings an owning card hands to its items: format version and charset."""

    version: str = "3.0"
    charset: str = "utf-8"

    @property
    def is_version3(self) -> bool:
        return self.version.startswith("3")
