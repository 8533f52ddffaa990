class FakeFile:
    """In-memory stand-in for a text file opened with ``newline=""``."""

    def __init__(self, name, contents):
        self.name = name
        self.contents = contents

    def __iter__(self):
        for line in self.contents:
            yield line
