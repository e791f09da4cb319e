"""Allow ``python -m navassist``."""

from navassist.main import main

main()
