import copy
from dataclasses import asdict, dataclass, field
from typing import List, Optional
import yaml


@dataclass
class GridConfig:
    width: int = 10
    height: int = 10


@dataclass
class BuilderConfig:
    builder_type: str = "iterative"  # Options: "recursive", "iterative"
    debug: bool = False  # Print the canvas after every cell visit

    def get_builder_cfg(self):
        return {
            "builder": self.builder_type,
            "debug": self.debug,
        }


@dataclass
class OpeningConfig:
    entrance: Optional[List[int]] = None  # Canvas [col, row]; None -> [2, 0]
    exit: Optional[List[int]] = None  # Canvas [col, row]; None -> bottom-right wall

    def get_opening_cfg(self):
        return {
            "entrance": self.entrance,
            "exit": self.exit,
        }


@dataclass
class LoggingConfig:
    log_path: Optional[str] = None  # JSON file receiving generation metrics
    plot_path: Optional[str] = None  # Image file for the rendered maze
    verbose: bool = True


@dataclass
class MazeConfig:
    seed: Optional[int] = None
    grid: GridConfig = field(default_factory=GridConfig)
    builder: BuilderConfig = field(default_factory=BuilderConfig)
    opening: OpeningConfig = field(default_factory=OpeningConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "MazeConfig":
        """Create a MazeConfig instance from a YAML file."""

        with open(yaml_path, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f) or {}

        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "MazeConfig":
        config_dict = dict(config_dict)
        # Convert nested dictionaries to their respective config classes
        if "grid" in config_dict:
            config_dict["grid"] = GridConfig(**config_dict["grid"])
        if "builder" in config_dict:
            config_dict["builder"] = BuilderConfig(**config_dict["builder"])
        if "opening" in config_dict:
            config_dict["opening"] = OpeningConfig(**config_dict["opening"])
        if "logging" in config_dict:
            config_dict["logging"] = LoggingConfig(**config_dict["logging"])

        return cls(**config_dict)

    def clone(self) -> "MazeConfig":
        """Create a deep copy of the maze configuration."""
        return copy.deepcopy(self)

    def to_yaml(self, yaml_path: str) -> None:
        """Save the MazeConfig instance to a YAML file."""
        with open(yaml_path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f)

    def to_dict(self) -> dict:
        """Convert the MazeConfig instance to a nested dictionary."""
        config_dict = asdict(self)
        # safe_load cannot read python/tuple tags back
        for key in ("entrance", "exit"):
            position = config_dict["opening"][key]
            if position is not None:
                config_dict["opening"][key] = [int(v) for v in position]
        return config_dict
