"""Allow running gh-fetch with ``python -m gh_fetch``."""

from gh_fetch.main import main

main()
