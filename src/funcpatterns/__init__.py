import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package
    if os.environ.get("FUNCPATTERNS_BEARTYPE_THIS_PACKAGE", "0") == "1":
        beartype_this_package()
    if os.environ.get("FUNCPATTERNS_BEARTYPE_ALL", "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))
from .core import Err, Nothing, Ok, Option, Result, Some, memoize

__version__ = "0.1.0"

__all__: list[str] = ["Err", "Nothing", "Ok", "Option", "Result", "Some", "__version__", "memoize"]
