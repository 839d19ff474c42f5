"""
Run the pymenu commands with ``python -m pymenu.cli``.

    $ ls | python -m pymenu.cli filter --query rdme --matcher fuzzy
    $ python -m pymenu.cli stest -flx "$PATH"
"""

from .main import main

if __name__ == "__main__":
    main()
