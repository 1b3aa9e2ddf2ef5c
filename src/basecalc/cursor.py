class EndOfInput(EOFError):
    '''
    Nothing left to read. Not an error in the input itself.
    '''


class Cursor:
    '''
    Character-at-a-time reader over an expression.

    Supports a single character of push-back after each read.
    '''

    def __init__(self, text):
        self.text = text
        self.position = 0
        self._can_push_back = False

    def read(self):
        '''
        Return the next character and advance past it.

        :raises EndOfInput: when the text is exhausted.
        '''
        if self.position >= len(self.text):
            self._can_push_back = False
            raise EndOfInput(self.position)
        char = self.text[self.position]
        self.position += 1
        self._can_push_back = True
        return char

    def push_back(self):
        '''
        Unread the character returned by the last read().
        '''
        if not self._can_push_back:
            raise RuntimeError('push_back() without a preceding read()')
        self.position -= 1
        self._can_push_back = False

    @property
    def remaining(self):
        return len(self.text) - self.position

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.read()
        except EndOfInput:
            raise StopIteration from None

    def __repr__(self):
        return '{}({!r}, position={})'.format(type(self).__name__,
                                              self.text,
                                              self.position)
