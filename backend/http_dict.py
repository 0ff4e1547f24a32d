from collections.abc import Mapping


class HeaderDict(Mapping):
    """Case-insensitive header mapping that remembers every received field.

    Lookups return the first value for a name; ``items()`` yields each
    field in the order it was received, repeated names included.
    """

    def __init__(self, fields=()):
        super().__init__()
        self._fields = []
        self._s = {}
        for k, v in fields:
            self.add(k, v)

    def add(self, key, value):
        self._s.setdefault(key.lower(), key)
        self._fields.append((key, value))

    def __getitem__(self, k):
        name = self._s[k.lower()].lower()
        for key, value in self._fields:
            if key.lower() == name:
                return value
        raise KeyError(k)

    def __iter__(self):
        return iter(self._s.values())

    def __len__(self):
        return len(self._s)

    def items(self):
        return list(self._fields)

    def __repr__(self):
        return f'HeaderDict({self._fields!r})'
