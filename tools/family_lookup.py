"""
tools/family_lookup.py
Canned family lookup. The family name is the last word of the message,
matched case-insensitively against a fixed table.
"""
from types import MappingProxyType
from typing import Mapping

NAME = "findChildrenOfParent"
DESCRIPTION = (
    "Find the children of a parent by family name. "
    "Pass a sentence ending with the family name, e.g. 'children of rujimin'"
)

FAMILIES: Mapping[str, str] = MappingProxyType({
    "rujimin": "The children of the Rujimin family are stella hermine lufgard and jonathan rujimin.",
    "damanik": "The children of the Damanik family are maria damanik and samuel damanik.",
    "makalew": "The children of the Makalew family are grace makalew, daniel makalew and ruth makalew.",
})


def run(message: str) -> str:
    words = message.lower().split()
    if words and words[-1] in FAMILIES:
        return FAMILIES[words[-1]]
    return "No information found for: " + message
