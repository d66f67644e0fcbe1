"""Property-based tests for ``--set`` override parsing.

Uses hypothesis to check ``parse_override`` and ``coerce_value`` against
arbitrary strings rather than hand-picked examples.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from progshell.adapters.config.overrides import coerce_value, parse_override

IDENTIFIER = st.from_regex(r"[a-z_][a-z0-9_]{0,15}", fullmatch=True)
COERCED_TYPES = (str, int, float, bool, type(None), list, dict)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    assert isinstance(coerce_value(raw), COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_integers_come_back_as_integers(value: int) -> None:
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(section=IDENTIFIER, keys=st.lists(IDENTIFIER, min_size=1, max_size=4), value=st.text(alphabet="abcXYZ=.", max_size=10))
def test_dotted_path_splits_into_section_and_key_path(section: str, keys: list[str], value: str) -> None:
    result = parse_override(f"{section}.{'.'.join(keys)}={value}")

    assert result.section == section
    assert result.key_path == tuple(keys)


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda text: "=" not in text))
def test_text_without_equals_is_always_rejected(raw: str) -> None:
    with pytest.raises(ValueError, match="must contain '='"):
        parse_override(raw)
