# objweld/errors.py
"""
Ошибки загрузки OBJ.

Каждая ошибка фатальна для текущей загрузки. У каждого класса есть
метка `kind` и структурированные поля, чтобы вызывающий код мог разбирать
ошибку без парсинга текста сообщения. `line_no` (1‑based) заполняется
загрузчиком, когда ошибка возникла внутри конкретной строки файла.
"""


class ObjError(Exception):
    kind = "ObjError"

    def __init__(self, message: str, line_no: int = None):
        super().__init__(message)
        self.message = message
        self.line_no = line_no

    def __str__(self):
        if self.line_no is not None:
            return f"line {self.line_no}: {self.message}"
        return self.message


class IoOpenError(ObjError):
    kind = "IoOpenFailure"

    def __init__(self, path):
        super().__init__(f"Error opening OBJ file: {path}")
        self.path = str(path)


class IoReadError(ObjError):
    kind = "IoReadFailure"

    def __init__(self, reason: str, line_no: int = None):
        super().__init__(f"Error reading line: {reason}", line_no)


class MissingScalarError(ObjError):
    kind = "MissingScalar"

    def __init__(self, field: str, line_no: int = None):
        super().__init__(f"missing scalar for {field}", line_no)
        self.field = field


class MalformedScalarError(ObjError):
    kind = "MalformedScalar"

    def __init__(self, field: str, token: str, line_no: int = None):
        super().__init__(f"malformed scalar {token!r} for {field}", line_no)
        self.field = field
        self.token = token


class MissingPositionIndexError(ObjError):
    kind = "MissingPositionIndex"

    def __init__(self, token: str = "", line_no: int = None):
        super().__init__(f"index for position is required (corner {token!r})", line_no)
        self.token = token


class UnsupportedFaceArityError(ObjError):
    kind = "UnsupportedFaceArity"

    def __init__(self, count: int, line_no: int = None):
        super().__init__(
            f"unexpected number of vertices: {count} (only triangles and quads are supported)",
            line_no)
        self.count = count


class InvalidIndexError(ObjError):
    kind = "InvalidIndex"

    def __init__(self, field: str, value: int, pool_size: int, line_no: int = None):
        if value == 0:
            reason = "index 0 is not a valid OBJ reference"
        else:
            reason = f"index {value} is out of range for {pool_size} entries"
        super().__init__(f"{field}: {reason}", line_no)
        self.field = field
        self.value = value
        self.pool_size = pool_size


class InconsistentAttributesError(ObjError):
    kind = "InconsistentAttributes"

    def __init__(self, attribute: str, present: int, total: int):
        super().__init__(
            f"{attribute} present on {present} of {total} vertices "
            f"(attribute_policy is 'strict')")
        self.attribute = attribute
        self.present = present
        self.total = total


__all__ = [
    "ObjError",
    "IoOpenError",
    "IoReadError",
    "MissingScalarError",
    "MalformedScalarError",
    "MissingPositionIndexError",
    "UnsupportedFaceArityError",
    "InvalidIndexError",
    "InconsistentAttributesError",
]
