"""Pure helpers that split a Datastar attribute name into base name and modifiers."""

from datastar_hygiene.domain.constants import DATASTAR_PREFIX, MODIFIER_DELIMITER


class AttributeNames:
    """
    Attribute name decomposition.

    "data-on:click__debounce.500ms__once" -> base "data-on:click",
    modifiers ["debounce.500ms", "once"].
    """

    @staticmethod
    def is_datastar(name: str) -> bool:
        return name.startswith(DATASTAR_PREFIX)

    @staticmethod
    def base_name(name: str, delimiter: str = MODIFIER_DELIMITER) -> str:
        """Return the name up to the first delimiter, or the whole name."""
        pos = name.find(delimiter)
        return name if pos < 0 else name[:pos]

    @staticmethod
    def modifiers(name: str, delimiter: str = MODIFIER_DELIMITER) -> list[str]:
        """
        Return modifier tokens in order.

        Tokens between two delimiters are kept even when empty; a name that
        ends exactly at a delimiter does not produce a trailing empty token.
        """
        found: list[str] = []
        pos = name.find(delimiter)
        while pos >= 0:
            start = pos + len(delimiter)
            nxt = name.find(delimiter, start)
            if nxt < 0:
                tail = name[start:]
                if tail:
                    found.append(tail)
                break
            found.append(name[start:nxt])
            pos = nxt
        return found

    @staticmethod
    def split_modifier(modifier: str) -> tuple[str, str | None]:
        """Split "debounce.500ms.leading" into ("debounce", "500ms.leading")."""
        base, dot, rest = modifier.partition(".")
        return base, (rest if dot else None)
