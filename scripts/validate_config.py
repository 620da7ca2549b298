#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fsm_steps.config.loader import ConfigLoader
from fsm_steps.config.validation import ConfigValidator


def main() -> int:
    """Validate steps.yaml from the given directory (default: ./config)."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else project_root / "config"
    loader = ConfigLoader.create(config_dir)

    print(f"Validating {config_dir / 'steps.yaml'}...")

    errors = ConfigValidator.validate_config(loader.merge_config())
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        return 1

    config = loader.load()
    print("Configuration valid")
    print(f"  initial_state:   {config.engine.initial_state}")
    print(f"  catch_key:       {config.engine.catch_key}")
    print(f"  log_transitions: {config.engine.log_transitions}")
    print(f"  logging.level:   {config.logging.level}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
