"""
Entry point for `python -m helpoverlay`.

The `helpoverlay` console script declared in pyproject.toml calls
`helpoverlay.main:main` directly; both paths end up in the same function.
"""

from .main import main

if __name__ == "__main__":
    main()
