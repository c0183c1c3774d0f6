"""Allow running the generator with `python -m gravitywords`."""

from gravitywords import main

main()
