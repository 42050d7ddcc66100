"""Single-precision floating-point and 64-bit integer math helpers."""