import os
import sys

if getattr(sys, "frozen", False):
    root = getattr(sys, "_MEIPASS", os.path.dirname(sys.executable))
else:
    root = os.path.abspath(os.path.dirname(__file__))

if root not in sys.path:
    sys.path.insert(0, root)

from winversion.lib.ui.console import main
sys.exit(main())
