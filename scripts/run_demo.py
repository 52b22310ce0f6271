#!/usr/bin/env python3
"""
Inject the demo bean from a properties file and call foo().

Usage:
    python scripts/run_demo.py                        # INJECTOR_CONFIG_PATH or config/injector.properties
    python scripts/run_demo.py path/to/mapping.properties
"""

import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.config import get_settings
from core.container import Injector
from core.errors import ConfigLoadError
from core.logger import logger
from internal.demo.beans import SomeBean


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv

    try:
        settings = get_settings()
        if args:
            settings = settings.model_copy(update={"injector_config_path": args[0]})
        logger.info(
            f"{settings.app_name} v{settings.app_version}: using {settings.injector_config_path}"
        )

        injector = Injector.from_settings(settings)
        bean = injector.inject(SomeBean())
        bean.foo()
        return 0

    except ConfigLoadError as e:
        logger.error(f"Demo failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Demo interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
