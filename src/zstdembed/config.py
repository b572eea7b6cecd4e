"""BuildConfig: settings for the build-time code generator."""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from zstdembed.serde import (
    as_str_object_dict,
    is_dotted_name,
    optional_string,
    require_int,
    require_string,
)

DEFAULT_DISTRIBUTION = "zstdembed"
DEFAULT_LINE_WIDTH = 64
CONFIG_TABLE = ("tool", "zstdembed")


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Build-time settings, usually read from ``[tool.zstdembed]`` in ``pyproject.toml``.

    BuildConfig describes *where* sources live and *how* generated code looks.
    The compression level is not part of it: every embedding names its own.
    """

    root: Path | None = None
    import_name: str | None = None
    distribution: str = DEFAULT_DISTRIBUTION
    line_width: int = DEFAULT_LINE_WIDTH

    def __post_init__(self) -> None:
        """Validate names and widths."""
        if self.root is not None:
            object.__setattr__(self, "root", Path(self.root))
        if self.import_name is not None and not is_dotted_name(self.import_name):
            msg = f"BuildConfig.import_name {self.import_name!r} is not a dotted module name."
            raise ValueError(msg)
        if not self.distribution:
            msg = "BuildConfig.distribution must be a non-empty string."
            raise ValueError(msg)
        if self.line_width <= 0:
            msg = "BuildConfig.line_width must be > 0."
            raise ValueError(msg)

    def to_dict(self) -> dict[str, object]:
        """Serialize BuildConfig to a plain dictionary."""
        return {
            "root": str(self.root) if self.root is not None else None,
            "import_name": self.import_name,
            "distribution": self.distribution,
            "line_width": self.line_width,
        }

    @classmethod
    def from_dict(cls, value: Mapping[str, object], *, base_dir: Path | None = None) -> "BuildConfig":
        """Deserialize BuildConfig from a plain dictionary.

        A relative ``root`` is resolved against ``base_dir`` when given.
        """
        data = as_str_object_dict(value, field_name="BuildConfig")
        unknown = sorted(set(data) - {"root", "import_name", "distribution", "line_width"})
        if unknown:
            msg = f"Unknown BuildConfig keys: {', '.join(unknown)}."
            raise ValueError(msg)

        root_value = optional_string(data.get("root"), field_name="BuildConfig.root")
        root = Path(root_value) if root_value is not None else None
        if root is not None and base_dir is not None and not root.is_absolute():
            root = base_dir / root

        import_name = optional_string(data.get("import_name"), field_name="BuildConfig.import_name")
        distribution = require_string(
            data.get("distribution", DEFAULT_DISTRIBUTION),
            field_name="BuildConfig.distribution",
        )
        line_width = require_int(data.get("line_width", DEFAULT_LINE_WIDTH), field_name="BuildConfig.line_width")
        return cls(
            root=root,
            import_name=import_name,
            distribution=distribution,
            line_width=line_width,
        )


def load_config(path: str | Path) -> BuildConfig:
    """Load BuildConfig from the ``[tool.zstdembed]`` table of a pyproject file.

    A missing file or table gives the defaults, with ``root`` set to the
    directory holding the file.
    """
    path = Path(path).resolve()
    base_dir = path.parent
    if not path.is_file():
        return BuildConfig(root=base_dir)

    with path.open("rb") as handle:
        document = tomllib.load(handle)

    table: object = document
    for key in CONFIG_TABLE:
        if not isinstance(table, Mapping) or key not in table:
            return BuildConfig(root=base_dir)
        table = table[key]

    config = BuildConfig.from_dict(as_str_object_dict(table, field_name="tool.zstdembed"), base_dir=base_dir)
    if config.root is None:
        return replace(config, root=base_dir)
    return config
