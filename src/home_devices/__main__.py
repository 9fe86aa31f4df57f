"""Run the demonstration: python -m home_devices"""

import sys

from home_devices.demo import main

sys.exit(main())
