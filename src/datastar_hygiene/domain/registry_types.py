from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    display_name: str
    short_description: str
    manual_instructions: str
    references: list[str]
    example_bad: str
    example_good: str
