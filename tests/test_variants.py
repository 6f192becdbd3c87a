# tests/test_variants.py
from memberfy.pipeline.variants import VARIANTS, describe, get_variant, path_color_indices


def test_registry():
    assert set(VARIANTS) == {"custom_hat", "custom_member"}
    assert get_variant("custom_dog") is None

def test_hat_indices_are_column_plus_row_times_width():
    v = get_variant("custom_hat")
    assert path_color_indices(v) == [0, 0, 0, 28, 30, 41, 43, 46, 48, 59, 61]
    assert len(v.coordinates) == len(v.fragments)

def test_member_sizing():
    v = get_variant("custom_member")
    assert (v.grid_x, v.grid_y) == (9, 9)
    assert v.downsample == (25, 25)
    assert v.method == "kmeans"
    assert v.background is None and v.badge is None
    assert path_color_indices(v) == [40, 41, 0, 50, 58, 67, 0, 46, 58]

def test_every_placeholder_fragment_is_reachable():
    # фрагменты с COLOR должны иметь координату, иначе они останутся некрашеными
    for v in VARIANTS.values():
        for i, fragment in enumerate(v.fragments):
            if "COLOR" in fragment:
                assert i < len(v.coordinates), (v.name, i)

def test_describe():
    out = describe(get_variant("custom_hat"))
    assert out.grid == (9, 9)
    assert out.fragments == 11
    assert out.downsample is None
