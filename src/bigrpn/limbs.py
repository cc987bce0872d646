from array import array


class LimbBuffer:
    '''
    Growable sequence of unsigned 32-bit limbs.

    Pure storage: no arithmetic meaning is attached to the values. Out of
    range reads return 0 and out of range writes are ignored; callers are
    expected to stay in bounds.
    '''
    TYPECODE = 'I'

    def __init__(self, values=()):
        self._data = array(type(self).TYPECODE, values)

    def append(self, value):
        self._data.append(value)

    def pop(self):
        '''
        Remove and return the last limb, 0 if empty.
        '''
        if not self._data:
            return 0
        return self._data.pop()

    def get(self, index):
        if 0 <= index < len(self._data):
            return self._data[index]
        return 0

    def set(self, index, value):
        if 0 <= index < len(self._data):
            self._data[index] = value

    def clear(self):
        del self._data[:]

    def resize(self, size):
        '''
        Truncate to size, or pad with zero limbs up to it.
        '''
        length = len(self._data)
        if size < length:
            del self._data[size:]
        elif size > length:
            self._data.extend([0] * (size - length))

    def clone(self):
        return type(self)(self._data)

    __copy__ = clone

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __reversed__(self):
        return reversed(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __eq__(self, other):
        if not isinstance(other, LimbBuffer):
            return NotImplemented
        return self._data == other._data

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, list(self._data))
