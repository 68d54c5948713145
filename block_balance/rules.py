# Standard Library
import json


DEFAULT_MARKERS: dict[str, str] = {
	"open": "(",
	"close": ")",
}


#============================================


def validate_markers(markers: dict[str, str]) -> dict[str, str]:
	"""
	Check that open and close markers are distinct single characters.

	Args:
		markers: Dict with "open" and "close" keys.

	Returns:
		dict[str, str]: The same markers.
	"""
	for key in ("open", "close"):
		value = markers.get(key)
		if not isinstance(value, str) or len(value) != 1:
			raise ValueError(f"{key} marker must be a single character, got {value!r}")
	if markers["open"] == markers["close"]:
		raise ValueError("open and close markers must differ")
	return markers


#============================================


def load_markers(rules_file: str | None) -> dict[str, str]:
	"""
	Load open/close markers from JSON or fall back to defaults.

	Args:
		rules_file: Optional path to a JSON file with "open" and "close" keys.

	Returns:
		dict[str, str]: Markers.
	"""
	if rules_file is None:
		return dict(DEFAULT_MARKERS)
	with open(rules_file, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	if not isinstance(data, dict):
		raise ValueError("rules file must contain a JSON object")
	markers = {
		"open": data.get("open", DEFAULT_MARKERS["open"]),
		"close": data.get("close", DEFAULT_MARKERS["close"]),
	}
	return validate_markers(markers)
