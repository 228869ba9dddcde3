"""Unit tests for AttributeNames."""

import pytest

from datastar_hygiene.domain.attribute_names import AttributeNames


class TestAttributeNames:
    """Base name and modifier decomposition."""

    def test_base_and_modifiers(self) -> None:
        name = "data-on:click__debounce.500ms__once"

        assert AttributeNames.base_name(name) == "data-on:click"
        assert AttributeNames.modifiers(name) == ["debounce.500ms", "once"]

    def test_name_without_modifiers(self) -> None:
        assert AttributeNames.base_name("data-show") == "data-show"
        assert AttributeNames.modifiers("data-show") == []

    def test_empty_middle_token_is_kept(self) -> None:
        assert AttributeNames.modifiers("data-on:click____once") == ["", "once"]

    def test_trailing_delimiter_adds_no_token(self) -> None:
        assert AttributeNames.modifiers("data-on:click__once__") == ["once"]
        assert AttributeNames.modifiers("data-on:click__") == []

    def test_custom_delimiter(self) -> None:
        assert AttributeNames.base_name("data-on:click.once", ".") == "data-on:click"
        assert AttributeNames.modifiers("data-on:click.once.stop", ".") == ["once", "stop"]

    @pytest.mark.parametrize(
        "name",
        [
            "data-on:click__debounce.500ms__once",
            "data-signals__case.kebab",
            "data-on-intersect__once__half",
            "data-persist__session",
        ],
    )
    def test_round_trip(self, name: str) -> None:
        parts = [AttributeNames.base_name(name), *AttributeNames.modifiers(name)]

        assert "__".join(parts) == name

    def test_split_modifier(self) -> None:
        assert AttributeNames.split_modifier("debounce.500ms.leading") == ("debounce", "500ms.leading")
        assert AttributeNames.split_modifier("once") == ("once", None)
        assert AttributeNames.split_modifier("case.") == ("case", "")

    def test_is_datastar(self) -> None:
        assert AttributeNames.is_datastar("data-show")
        assert not AttributeNames.is_datastar("x-show")
        assert not AttributeNames.is_datastar("class")
