import sys

from basket.interface.basket_app import main

sys.exit(main())
