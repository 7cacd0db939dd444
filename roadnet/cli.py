"""A simple parser for command-line options of the form -name value..."""

from roadnet.strings import lexical_cast

_UNSET = object()


def _zero_value(cast):
    if cast in (int, float, str):
        return cast()
    return None


class CommandLineParser:
    """Collects options '-name [value ...]' from a list of arguments."""

    def __init__(self, argv=None):
        self._options = {}
        if argv is not None:
            self.parse(argv)

    def parse(self, argv):
        """Parse the arguments, excluding the program name."""
        tokens = list(argv)
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not token.startswith("-"):
                raise ValueError(f"missing option name before '{token}'")
            name = token[1:]
            i += 1
            values = []
            while i < len(tokens) and not tokens[i].startswith("-"):
                values.append(tokens[i])
                i += 1
            self._options[name] = values or [""]

    def is_set(self, name):
        """Return True if the option was given."""
        return name in self._options

    def get_value(self, name, default=_UNSET, cast=str):
        """Return the first value of the option converted by cast, or default if not given.

        Without a default, an unset option yields the zero value of cast.
        """
        if self.is_set(name):
            return lexical_cast(self._options[name][0], cast)
        if default is _UNSET:
            return _zero_value(cast)
        return default

    def get_values(self, name, cast=str):
        """Return all values of the option converted by cast."""
        return [lexical_cast(value, cast) for value in self._options.get(name, [])]