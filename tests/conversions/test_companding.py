import numpy as np
from tinygradient.conversions import (
    np_srgb_to_linear,
    np_linear_to_srgb,
    expand_rgba,
    compress_rgba,
    unit_to_byte,
)


def test_transfer_function_endpoints():
    assert np_srgb_to_linear(0.0) == 0.0
    assert np_srgb_to_linear(1.0) == 1.0
    assert np_linear_to_srgb(0.0) == 0.0
    assert abs(np_linear_to_srgb(1.0) - 1.0) < 1e-12


def test_linear_half_is_not_encoded_half():
    # Linear-light 0.5 sits well above the encoded midpoint
    assert abs(np_linear_to_srgb(0.5) - 0.735357) < 1e-5
    assert unit_to_byte(np.array([np_linear_to_srgb(0.5)]))[0] == 188


def test_known_encoded_values():
    # Mid gray, the segment threshold and 18% linear gray
    assert np.allclose(np_srgb_to_linear(np.array([0.5, 0.04045, 0.75])), [0.214041, 0.0031308, 0.522522], atol=1e-5)
    assert np.allclose(np_linear_to_srgb(np.array([0.214041, 0.18])), [0.5, 0.461356], atol=1e-5)


def test_every_byte_survives_expand_compress():
    encoded = np.arange(256) / 255
    back = unit_to_byte(np_linear_to_srgb(np_srgb_to_linear(encoded)))
    assert np.array_equal(back, np.arange(256, dtype=np.uint8))


def test_linear_segment_below_threshold():
    assert abs(np_srgb_to_linear(0.04) - 0.04 / 12.92) < 1e-12
    assert abs(np_linear_to_srgb(0.003) - 0.003 * 12.92) < 1e-12


def test_expand_and_compress_leave_alpha_alone():
    rgba = np.array([[0.5, 0.25, 1.0, 0.3]])
    expanded = expand_rgba(rgba)
    assert expanded[0, 3] == 0.3
    assert abs(expanded[0, 0] - np_srgb_to_linear(0.5)) < 1e-12
    assert np.allclose(compress_rgba(expanded), rgba)
    # input untouched
    assert rgba[0, 0] == 0.5


def test_compress_clips_out_of_range():
    out = np_linear_to_srgb(np.array([-0.5, 1.5]))
    assert np.allclose(out, [0.0, 1.0])


def test_unit_to_byte_rounds_half_up_and_clamps():
    result = unit_to_byte(np.array([-0.1, 0.0, 0.5 / 255, 1.0, 1.2]))
    assert result.dtype == np.uint8
    assert list(result) == [0, 0, 1, 255, 255]
