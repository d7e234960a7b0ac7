#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from lrc_app.config.loader import ConfigLoader
from lrc_app.config.validation import ConfigValidator, ValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> List[ValidationError]:
    """Validate merged configuration for a specific symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def configured_symbols(loader: ConfigLoader) -> List[str]:
    """Symbols listed in symbols.yaml plus one that only uses defaults."""
    symbols_file = loader.config_dir / "symbols.yaml"
    symbols: List[str] = []
    if symbols_file.exists():
        with open(symbols_file) as f:
            symbols = list((yaml.safe_load(f) or {}).get("symbols", {}) or {})
    return symbols + ["UNKNOWN-SYMBOL"]


def main():
    """Main validation function."""
    print("🔍 Validating LRC App configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    for symbol in configured_symbols(loader):
        print(f"\n📊 Validating {symbol}...")

        try:
            errors = validate_symbol_config(loader, symbol)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
            else:
                print(f"✅ {symbol} configuration is valid")

        except Exception as e:
            print(f"❌ Error validating {symbol}: {e}")
            all_valid = False

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
