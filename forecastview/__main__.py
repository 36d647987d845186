import sys

from forecastview.cli import main

sys.exit(main())
