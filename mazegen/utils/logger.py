import os
import json
from typing import Any, Dict


class Logger:
    def __init__(self):
        self.metrics = {}

    def log(self, key: str, value: Any):
        """Log a metric value, converting numpy scalars and arrays to plain Python."""
        if key not in self.metrics:
            self.metrics[key] = []

        if hasattr(value, "tolist"):  # numpy scalar or array
            processed_value = value.tolist()
        elif isinstance(value, tuple):
            processed_value = list(value)
        else:
            processed_value = value

        self.metrics[key].append(processed_value)

    def summary(self) -> Dict[str, Dict[str, Any]]:
        """Number of entries and latest value for every metric."""
        return {
            key: {"count": len(values), "last": values[-1] if values else None}
            for key, values in self.metrics.items()
        }

    def save(self, path: str, append=True) -> None:
        """Append the latest value of every metric to a JSON list file."""
        dirname = os.path.dirname(path)
        if dirname:
            os.makedirs(dirname, exist_ok=True)

        current_step_data = {"step": len(self.metrics.get("depth", []))}
        for key, values in self.metrics.items():
            if values:
                current_step_data[key] = values[-1]

        existing_data = []
        if os.path.exists(path) and os.path.getsize(path) > 0 and append:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    existing_data = json.load(f)
                if not isinstance(existing_data, list):
                    existing_data = []
            except (json.JSONDecodeError, ValueError, IOError) as e:
                print(f"Warning: Failed to read {path}, starting fresh: {e}")
                existing_data = []

        existing_data.append(current_step_data)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(existing_data, f, indent=2)
        except IOError as e:
            print(f"Warning: Failed to write to {path}: {e}")

    def clear(self):
        """Clear all logged metrics."""
        self.metrics.clear()
