# -*- coding: utf-8 -*-
import pytest

from objweld.errors import (
    InvalidIndexError,
    MalformedScalarError,
    MissingPositionIndexError,
)
from objweld.loader.indices import ABSENT, VertexKey, parse_corner, resolve_index
from objweld.loader.ingest import AttributePools
from objweld.math import Mat4


@pytest.fixture
def pools():
    p = AttributePools(Mat4.identity())
    for i in range(4):
        p.add_point([str(i), "0", "0"])
    p.add_uv(["0", "0"])
    p.add_uv(["1", "0"])
    p.add_normal(["0", "0", "1"])
    return p


def test_positive_index_is_one_based():
    assert resolve_index("1", "position", 4) == 0
    assert resolve_index("4", "position", 4) == 3


def test_negative_index_counts_from_end():
    assert resolve_index("-1", "position", 4) == 3
    assert resolve_index("-4", "position", 4) == 0


def test_zero_index_is_rejected():
    with pytest.raises(InvalidIndexError) as info:
        resolve_index("0", "position", 4)
    assert info.value.value == 0
    assert info.value.kind == "InvalidIndex"


@pytest.mark.parametrize("token", ["5", "-5"])
def test_out_of_range_index_is_rejected(token):
    with pytest.raises(InvalidIndexError) as info:
        resolve_index(token, "texcoord", 4)
    assert info.value.field == "texcoord"
    assert info.value.pool_size == 4


def test_non_integer_index_is_malformed():
    with pytest.raises(MalformedScalarError) as info:
        resolve_index("1.5", "position", 4)
    assert info.value.token == "1.5"


@pytest.mark.parametrize("token", ["0_3", "1_0", "\u0663", "\uff11", " 1", "1e2", "+"])
def test_loose_integer_syntax_is_malformed(token):
    with pytest.raises(MalformedScalarError) as info:
        resolve_index(token, "position", 4)
    assert info.value.token == token


def test_signed_indices_are_accepted():
    assert resolve_index("+2", "position", 4) == 1


def test_corner_forms(pools):
    assert parse_corner("2", pools) == VertexKey(1, ABSENT, ABSENT)
    assert parse_corner("2/1", pools) == VertexKey(1, 0, ABSENT)
    assert parse_corner("2/2/1", pools) == VertexKey(1, 1, 0)
    assert parse_corner("2//1", pools) == VertexKey(1, ABSENT, 0)


def test_relative_corner_matches_absolute(pools):
    assert parse_corner("-1/-1/-1", pools) == parse_corner("4/2/1", pools)


def test_missing_position_is_an_error(pools):
    with pytest.raises(MissingPositionIndexError):
        parse_corner("/1/1", pools)
    with pytest.raises(MissingPositionIndexError):
        parse_corner("//1", pools)


def test_key_presence_flags():
    key = VertexKey(0, ABSENT, 2)
    assert not key.has_texcoord
    assert key.has_normal
    assert key == (0, -1, 2)
    assert hash(key) == hash(VertexKey(0, -1, 2))
