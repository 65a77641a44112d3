from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

from .errors import InvalidConfigError

_FLAG_FIELDS = (
    "extract_hashtags",
    "extract_mentions",
    "extract_links",
    "extract_props",
    "extract_emoji",
)


@dataclass(frozen=True)
class SegmentConfig:
    """
    Stable, SDK-first configuration for one segmentation run.

    The CLI and HTTP API map flags -> this object; the SDK accepts this object directly.
    Callables and styles live in `PressHandlers` / `SegmentStyles` so this stays JSON-friendly.
    """

    extract_hashtags: bool = True
    extract_mentions: bool = True
    extract_links: bool = True

    # Optional stages.
    extract_props: bool = True
    extract_emoji: bool = True

    # Serialization schema version for backwards-compatible config dicts.
    # NOTE: keep this field last to avoid breaking positional construction.
    schema_version: int = 1

    def normalized(self) -> "SegmentConfig":
        """Return a validated config with every flag coerced to a real bool."""

        for name in _FLAG_FIELDS:
            v = getattr(self, name)
            if not isinstance(v, (bool, int)):
                raise InvalidConfigError(f"{name} must be a bool, got {type(v).__name__}")
        try:
            schema_version = int(self.schema_version)
        except (TypeError, ValueError) as e:
            raise InvalidConfigError("schema_version must be an integer") from e

        return SegmentConfig(
            extract_hashtags=bool(self.extract_hashtags),
            extract_mentions=bool(self.extract_mentions),
            extract_links=bool(self.extract_links),
            extract_props=bool(self.extract_props),
            extract_emoji=bool(self.extract_emoji),
            schema_version=max(1, schema_version),
        )

    def to_dict(self) -> dict[str, object]:
        return dict(asdict(self))

    @classmethod
    def from_dict(cls, data: dict[str, object], *, strict: bool = False) -> "SegmentConfig":
        """
        Load a config from a JSON-friendly dict.

        Backward compatibility policy:
          - Older dicts without `schema_version` are accepted.
          - Unknown keys are ignored by default (strict=False).
          - Values are coerced conservatively (e.g., "false" -> False) where safe.
        """

        if not isinstance(data, dict):
            raise InvalidConfigError("config must be a dict")

        allowed = {f.name for f in fields(cls)}
        unknown = sorted([k for k in data.keys() if k not in allowed])
        if unknown and strict:
            raise InvalidConfigError(f"Unknown config keys: {', '.join(unknown)}")

        def as_bool(name: str, v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            s = str(v or "").strip().lower()
            if s in {"1", "true", "t", "yes", "y", "on"}:
                return True
            if s in {"0", "false", "f", "no", "n", "off", ""}:
                return False
            raise InvalidConfigError(f"{name} must be a boolean, got {v!r}")

        kwargs: dict[str, Any] = {}
        for name in _FLAG_FIELDS:
            if name in data:
                kwargs[name] = as_bool(name, data.get(name))
        if "schema_version" in data:
            v = data.get("schema_version")
            try:
                kwargs["schema_version"] = int(v)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                kwargs["schema_version"] = 1

        return cls(**kwargs).normalized()
