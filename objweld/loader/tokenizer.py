# objweld/loader/tokenizer.py
"""
Разбиение строки OBJ на токены.

Первый токен определяет тип записи. Загрузчик обрабатывает только
RECORD_KINDS, всё остальное (комментарии, пустые строки, o/g/s/usemtl, ...)
молча пропускается.
"""

POSITION = "v"
TEXCOORD = "vt"
NORMAL = "vn"
FACE = "f"

RECORD_KINDS = (POSITION, TEXCOORD, NORMAL, FACE)


def tokenize(line: str):
    """Вернуть (kind, args). Для пустой строки kind = None."""
    tokens = line.split()
    if not tokens:
        return None, []
    return tokens[0], tokens[1:]


def is_record(kind) -> bool:
    return kind in RECORD_KINDS
