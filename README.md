# modemchannel

Simulated transmission channels for exercising modem and serial-line
receivers under noise and clock mismatch. It is pure Python and has no
dependencies.

## Channel models

`modemchannel.channel` provides:

- `awgn_channel(rng, noise_amplitude, timing_offset, samples)` adds
  Gaussian noise with standard deviation `noise_amplitude` to each
  analogue sample, then resamples the result with
  `apply_timing_offset`.
- `awgn_channel_eb_n0_db(rng, eb_n0_db, timing_offset, samples, samples_per_symbol)`
  does the same, with the noise level derived from an Eb/N0 figure in dB
  and the average power of `samples`. It assumes one bit per symbol, so
  Eb equals Es.
- `signal_avg_power(samples)` returns the mean of the squared samples
  (0 for an empty sequence).
- `bs_transition_channel(rng, flip_probability, samples_affected_on_transition, timing_offset, samples)`
  is a channel for digital 0/1 samples. At each level transition, the
  next `samples_affected_on_transition` samples (starting with the one
  that changed) are each flipped with probability `flip_probability`.
  The result is resampled and thresholded at 0.5 back to a list of
  `int` bits.
- `apply_timing_offset(timing_offset, samples)` resamples a sequence by
  linear interpolation as if it were read with a clock scaled by
  `timing_offset`. For `n` input samples the output has
  `int((n - 1) / timing_offset) + 1` samples, so an offset above 1
  shortens the signal and an offset below 1 lengthens it. Points past
  the end take the last sample's value.

`rng` is a `random.Random` instance, so runs can be repeated from a seed.

`apply_timing_offset`, and every channel that uses it, raises
`ValueError` if the timing offset is not positive or if fewer than two
samples are given.

## Interpolation

`modemchannel.interp` provides
`interp(shape, yd, grids, points, order=Order.NATURAL)`, multilinear
interpolation on a rectilinear grid in any number of dimensions:

- `shape` gives the number of grid points on each axis;
- `yd` is the flattened data, of length equal to the product of `shape`;
- `grids` holds the increasing tick values of each axis;
- `points` holds, for each axis, the coordinate of every query point.

It returns a list with one value per query point. Points outside the
grid take the value at the nearest boundary. Inconsistent lengths raise
`ValueError`.

`Order` selects the layout of `yd`: `Order.NATURAL` is row-major (last
axis varies fastest) and `Order.REVERSED` is column-major.
`Order.flat_index(shape, indices)` maps per-axis indices to a position
in the flat data.

## Example

```python
import random
from modemchannel.channel import awgn_channel_eb_n0_db, bs_transition_channel
from modemchannel.interp import interp

rng = random.Random(42)

bits = [1] * 40 + [0] * 40 + [1] * 40
received_bits = bs_transition_channel(rng, 0.5, 10, 1.01, bits)

tone = [0.0, 1.0, 0.0, -1.0] * 100
received = awgn_channel_eb_n0_db(rng, 10.0, 1.0, tone, samples_per_symbol=40)

# 2x2 grid, value at the centre
interp((2, 2), [0.0, 1.0, 2.0, 3.0], [[0.0, 1.0], [0.0, 1.0]], [[0.5], [0.5]])
# -> [1.5]
```

## What it does not do

The package only models the channel. It has no modulator or
demodulator, no serial-line framing of bytes into samples, and no
command-line program: the transmitter and receiver under test must be
supplied by you.

## Running the tests

```
pip install -e ".[test]"
pytest
```