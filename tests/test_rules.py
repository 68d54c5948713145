# Standard Library
import json
from pathlib import Path

import pytest

# Local modules
import block_balance.rules


#============================================


def test_load_markers_defaults() -> None:
	markers = block_balance.rules.load_markers(None)
	assert markers == {"open": "(", "close": ")"}
	markers["open"] = "["
	assert block_balance.rules.DEFAULT_MARKERS["open"] == "("


def test_load_markers_from_json(tmp_path: Path) -> None:
	rules_file = tmp_path / "rules.json"
	rules_file.write_text(json.dumps({"open": "{"}), encoding="utf-8")
	markers = block_balance.rules.load_markers(str(rules_file))
	assert markers == {"open": "{", "close": ")"}


@pytest.mark.parametrize(
	"markers",
	[
		{"open": "((", "close": ")"},
		{"open": "(", "close": ""},
		{"open": "|", "close": "|"},
		{"open": "("},
	],
)
def test_validate_markers_rejects(markers: dict[str, str]) -> None:
	with pytest.raises(ValueError):
		block_balance.rules.validate_markers(markers)


@pytest.mark.parametrize("payload", [["<", ">"], "<>", 3])
def test_load_markers_rejects_non_object(tmp_path: Path, payload: object) -> None:
	rules_file = tmp_path / "rules.json"
	rules_file.write_text(json.dumps(payload), encoding="utf-8")
	with pytest.raises(ValueError, match="JSON object"):
		block_balance.rules.load_markers(str(rules_file))
