import math
import random
import statistics

import pytest

from modemchannel.channel import (
    apply_timing_offset,
    awgn_channel,
    awgn_channel_eb_n0_db,
    bs_transition_channel,
    signal_avg_power,
)


def test_unit_timing_offset_is_identity():
    samples = [0.3, -1.2, 4.0, 2.5, 0.0]
    assert apply_timing_offset(1.0, samples) == pytest.approx(samples)


def test_double_timing_offset_takes_every_other_sample():
    samples = [float(v * v) for v in range(11)]
    assert apply_timing_offset(2.0, samples) == pytest.approx(samples[::2])


def test_half_timing_offset_interleaves_midpoints():
    samples = [1.0, 4.0, -2.0, 8.0]
    out = apply_timing_offset(0.5, samples)
    assert len(out) == 2 * len(samples) - 1
    assert out[::2] == pytest.approx(samples)
    mids = [(a + b) / 2 for a, b in zip(samples, samples[1:])]
    assert out[1::2] == pytest.approx(mids)


@pytest.mark.parametrize("offset, samples", [(1.0, [1.0]), (0.0, [1.0, 2.0]), (-1.0, [1.0, 2.0])])
def test_apply_timing_offset_rejects_bad_input(offset, samples):
    with pytest.raises(ValueError):
        apply_timing_offset(offset, samples)


def test_signal_avg_power_of_constant_amplitude():
    a = 1.7
    assert signal_avg_power([a, -a, a, -a]) == pytest.approx(a * a)


def test_signal_avg_power_of_nothing_is_zero():
    assert signal_avg_power([]) == 0.0


def test_awgn_without_noise_returns_input():
    samples = [0.5, -0.5, 1.0, 0.25]
    assert awgn_channel(random.Random(1), 0.0, 1.0, samples) == pytest.approx(samples)


def test_awgn_is_reproducible_with_seed():
    samples = [math.sin(i / 3) for i in range(50)]
    first = awgn_channel(random.Random(42), 0.3, 1.01, samples)
    second = awgn_channel(random.Random(42), 0.3, 1.01, samples)
    assert first == second
    assert first != pytest.approx(awgn_channel(random.Random(43), 0.3, 1.01, samples))


def test_awgn_noise_has_requested_deviation():
    amplitude = 0.5
    out = awgn_channel(random.Random(7), amplitude, 1.0, [0.0] * 20000)
    assert statistics.pstdev(out) == pytest.approx(amplitude, rel=0.05)
    assert abs(statistics.fmean(out)) < 0.05


def test_eb_n0_noise_level_matches_snr():
    sps = 20
    eb_n0_db = 10 * math.log10(0.5 * sps)  # SNR of 0 dB: noise power equals signal power
    samples = [1.0] * 20000
    out = awgn_channel_eb_n0_db(random.Random(3), eb_n0_db, 1.0, samples, sps)
    noise = [o - s for o, s in zip(out, samples)]
    assert statistics.pvariance(noise) == pytest.approx(signal_avg_power(samples), rel=0.05)


def test_eb_n0_silent_input_stays_silent():
    out = awgn_channel_eb_n0_db(random.Random(3), 5.0, 1.0, [0.0] * 10, 8)
    assert out == [0.0] * 10


def test_bs_channel_without_flips_is_identity():
    samples = [1, 1, 0, 0, 1, 0, 1, 1, 1, 0]
    assert bs_transition_channel(random.Random(0), 0.0, 3, 1.0, samples) == samples
    assert bs_transition_channel(random.Random(0), 1.0, 0, 1.0, samples) == samples


def test_bs_channel_always_flipping_delays_transition():
    k = 3
    samples = [0] * 5 + [1] * 10
    out = bs_transition_channel(random.Random(0), 1.0, k, 1.0, samples)
    assert out == [0] * (5 + k) + [1] * (10 - k)


def test_bs_channel_output_is_binary_and_resampled():
    rng = random.Random(9)
    samples = [rng.randint(0, 1) for _ in range(200)]
    out = bs_transition_channel(random.Random(5), 0.5, 4, 1.02, samples)
    assert set(out) <= {0, 1}
    assert len(out) == int((len(samples) - 1) / 1.02) + 1


def test_bs_channel_rejects_short_input():
    with pytest.raises(ValueError):
        bs_transition_channel(random.Random(0), 0.5, 2, 1.0, [1])