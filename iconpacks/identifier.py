"""The ``pack_id:icon_id`` reference used by every caller."""

from dataclasses import dataclass

from iconpacks.errors import MalformedIdentifierError

SEPARATOR = ":"


@dataclass(frozen=True)
class IconIdentifier:
    """Immutable reference to one icon inside one pack."""

    pack_id: str
    icon_id: str

    def __post_init__(self):
        _check_part("pack id", self.pack_id)
        _check_part("icon id", self.icon_id)

    @classmethod
    def parse(cls, text: str) -> "IconIdentifier":
        """Parse ``"pack_id:icon_id"``.

        Raises:
            MalformedIdentifierError: If the text does not split into two
                non-empty parts on the first colon.
        """
        if not isinstance(text, str) or SEPARATOR not in text:
            raise MalformedIdentifierError(
                f"Invalid icon reference {text!r}, expected 'pack_id:icon_id'"
            )
        pack_id, icon_id = text.split(SEPARATOR, 1)
        return cls(pack_id=pack_id, icon_id=icon_id)

    @classmethod
    def create(cls, pack_id: str, icon_id: str) -> "IconIdentifier":
        return cls(pack_id=pack_id, icon_id=icon_id)

    @property
    def full_id(self) -> str:
        return f"{self.pack_id}{SEPARATOR}{self.icon_id}"

    def __str__(self) -> str:
        return self.full_id


def _check_part(name: str, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise MalformedIdentifierError(f"Empty {name} in icon reference")
    if SEPARATOR in value:
        raise MalformedIdentifierError(
            f"Invalid {name} {value!r}: must not contain '{SEPARATOR}'"
        )
