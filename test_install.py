"""
Quick test script to verify ndmatrix installation and basic functionality.
"""

import ndmatrix as ndm
import numpy as np

print("=" * 80)
print("ndmatrix Installation Test")
print("=" * 80)

# Test 1: Fill an NDArray
print("\n1. Testing ndarray...")
matrix = ndm.NDArray((3, 4, 5), dtype=np.int64)
for i in range(matrix.length):
    matrix[i] = i
print(matrix)

# Test 2: Flat index to multi-index
print("2. 1-D index to N-D index...", end=" ")
temp_idx = ndm.NDArray(matrix.ndim, dtype=np.int64)
for idx in range(matrix.length):
    matrix.get_index(idx, temp_idx)
    assert matrix[temp_idx[0], temp_idx[1], temp_idx[2]] == matrix[idx]
print("✓ Pass")

# Test 3: Matrix resize and transposes
print("\n3. Testing Matrix...")
matrix3 = ndm.Matrix(4, 3, dtype=np.int64)
for i in range(matrix3.length):
    matrix3[i] = i
print(matrix3)

matrix3.resize(2, 3)
print("After resize to 2x3")
print(matrix3)

matrix4 = ndm.Matrix(3, 2, dtype=np.int64)
print("Out of place transpose")
matrix3.transpose(matrix4)
print(matrix4)

print("Inplace transpose")
matrix3.transpose()
print(matrix3)
assert matrix3 == matrix4

print("=" * 80)
print("✓ All tests passed! ndmatrix is working correctly.")
print("=" * 80)
