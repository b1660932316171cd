# microqr

Building blocks for Micro QR Code symbols (versions M1 to M4). It is written in
pure Python and has no dependencies.

## Modules

- `microqr.types`: the `EncodeMode` and `ECLevel` enums, the constants
  `QRSPEC_VERSION_MAX` (40) and `MQRSPEC_VERSION_MAX` (4), and the
  `api_version()` and `api_version_string()` functions.
- `microqr.bitstream`: `BitStream`, a growable sequence of 0/1 bits. It offers
  `append`, `append_num`, `append_bytes`, `to_bytes` and `reset`, along with
  `len()`, iteration and equality.
- `microqr.mqrspec`: the Micro QR specification tables. They are reached
  through `width`, `data_length`, `data_length_bit`, `ecc_length`,
  `length_indicator`, `maximum_words`, `format_info` and `new_frame`.
- `microqr.mmask`: the four Micro QR mask patterns and the functions that use
  them:
  - `make_masked_frame` and `make_mask` apply a pattern.
  - `write_format_information` writes the format information.
  - `evaluate_symbol` scores a symbol.
  - `best_mask` picks the highest-scoring pattern. It raises `ValueError` if no pattern scores above zero.
- `microqr.mask`: the eight full-size QR mask patterns (`make_masked_frame`)
  and the penalty rules:
  - `calc_n1n3`
  - `calc_n2`
  - `calc_run_length_h`
  - `calc_run_length_v`
  - `evaluate_symbol`, which gives the total penalty. Lower is better.
- `microqr.framefiller`: `FrameFiller`, an iterator over the indices of free
  modules in data-placement order. `fill_test_mqr(version)` returns a frame
  whose data modules hold their placement order.
- `microqr.encoder`:
  - `MicroRawCode`, which holds the data and ECC codewords and yields the modules to place.
  - `interleave_codes`, which interleaves Reed-Solomon blocks.
  - `encode_micro_from_codes`, which returns a `QRCode`. A `QRCode` offers `version`, `width`, `data`, `is_dark(x, y)` and `rows()`.
  - `AUTO_MASK` (-1) and `NO_MASK` (-2), the special mask values.

## Frame layout

A frame is a flat sequence of `width * width` integers, stored row by row.
Bit 0 of each module is 1 for dark and 0 for light. The higher bits record
the role of the module, for example ECC, format information, timing or finder.
Bit 7 set means the module is not a data module.

## Example

```python
from microqr import mqrspec
from microqr.bitstream import BitStream
from microqr.encoder import encode_micro_from_codes
from microqr.types import ECLevel

print(mqrspec.width(1))                     # 11
print(mqrspec.data_length(2, ECLevel.L))    # 5

bits = BitStream()
bits.append_num(4, 0b1010)
bits.append_bytes(b"\xff")
print(bits.to_bytes())                      # b'\xaf\xf0'

# M1-L holds 3 data codewords (the last one contributes 4 bits) and 2 ECC codewords.
symbol = encode_micro_from_codes(1, ECLevel.L, b"\x12\x34\x50", b"\xab\xcd", mask=0)
for row in symbol.rows():
    print("".join("#" if dark else "." for dark in row))
```

## What it does not do

- It does not turn text or bytes into codewords. There is no mode analysis,
  input splitting or padding.
- It does not compute Reed-Solomon error correction codewords. The caller
  supplies both the data codewords and the ECC codewords to
  `encode_micro_from_codes`.
- It does not build full-size QR Code symbols. `microqr.mask` provides the
  mask patterns and penalty scoring, but there are no full-size frames and no
  full-size format information.
- It has no image output and no command-line tool. Rendering the modules
  returned by `QRCode.rows()` is up to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```