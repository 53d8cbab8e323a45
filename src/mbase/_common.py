'''
Shared helpers for objects which are fully built at construction.
'''

from typing import NoReturn, Self

class Immutable:
    '''
    Objects which are only assigned in `__init__` via `_freeze` and raise on
    any later attempt to modify them.
    '''
    __slots__ = ()

    def _freeze(self, **attrs) -> None:
        '''Assigns attributes during construction.'''
        for name, value in attrs.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value, /) -> NoReturn:
        raise TypeError(f"{type(self).__name__} objects are immutable, can't set {name!r}")

    def __delattr__(self, name, /) -> NoReturn:
        raise TypeError(f"{type(self).__name__} objects are immutable, can't delete {name!r}")

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self
