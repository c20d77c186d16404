"""Environment variable adapter for action inputs.

Purpose
-------
Resolve the ``with:`` inputs a workflow passes to the step. The hosted runner
exports each input as ``INPUT_<NAME>`` before starting the process, so reading
inputs is a namespaced environment lookup.

Key behaviours
--------------
* Spaces in input names become underscores and the name is upper-cased
  (``input_env_key``).
* Missing variables read as the empty string.
* ``required=True`` turns an empty value into :class:`InputRequiredError`.
* Surrounding whitespace is trimmed unless ``trim_whitespace=False``. The
  trimmed set is the one JavaScript's ``String.prototype.trim`` uses
  (``TRIM_CHARACTERS``), which differs from :meth:`str.strip`: the
  information separators ``\\x1c``-``\\x1f`` and ``\\x85`` are kept, while
  ``\\ufeff`` is removed.
* Emits structured logging via :mod:`action_template_py.observability`; values
  are never logged because inputs may carry secrets.
"""

from __future__ import annotations

import os
from typing import Final, Mapping

from ...domain.errors import InputRequiredError
from ...observability import log_debug, make_event

INPUT_PREFIX: Final[str] = "INPUT_"

TRIM_CHARACTERS: Final[str] = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def input_env_key(name: str) -> str:
    """Return the environment variable that carries input *name*.

    Examples
    --------
    >>> input_env_key('name')
    'INPUT_NAME'
    >>> input_env_key('who to greet')
    'INPUT_WHO_TO_GREET'
    """

    return INPUT_PREFIX + name.replace(" ", "_").upper()


class DefaultInputReader:
    """Read action inputs from the process environment."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the reader with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        """

        self._environ = os.environ if environ is None else environ

    def get_input(self, name: str, *, required: bool = False, trim_whitespace: bool = True) -> str:
        """Return the value supplied for input *name*.

        Parameters
        ----------
        name:
            Input name as declared in ``action.yml``.
        required:
            Raise instead of returning an empty string.
        trim_whitespace:
            Strip leading and trailing whitespace from the value.

        Raises
        ------
        InputRequiredError
            When *required* is set and the variable is missing or empty.

        Examples
        --------
        >>> reader = DefaultInputReader(environ={'INPUT_NAME': '  Mona  '})
        >>> reader.get_input('name')
        'Mona'
        >>> reader.get_input('name', trim_whitespace=False)
        '  Mona  '
        >>> reader.get_input('missing')
        ''
        """

        key = input_env_key(name)
        value = self._environ.get(key, "")
        log_debug("input_read", **make_event("input", key, {"present": key in self._environ, "required": required}))
        if required and not value:
            raise InputRequiredError(f"Input required and not supplied: {name}")
        if not trim_whitespace:
            return value
        return value.strip(TRIM_CHARACTERS)
