"""Linear prediction of a resistor value from voltage and current."""

from __future__ import annotations

import sys

TRAINING_DATA = ((5.0, 2.0), (10.0, 1.5), (7.0, 3.0))
RESISTORS = (2.5, 6.67, 2.33)
SAMPLE_VOLTAGE = 8.0
SAMPLE_CURRENT = 2.5

_RELATIVE_THRESHOLD = 1e-12


def solve_full_pivot(matrix, rhs):
    """Solve ``matrix @ x = rhs`` by Gaussian elimination with full pivoting.

    Rectangular and rank-deficient systems are accepted: the unknowns that
    get no pivot are set to zero. Raises ValueError for an empty or ragged
    matrix or a right-hand side of the wrong length.
    """
    a = [[float(v) for v in row] for row in matrix]
    if not a or not a[0]:
        raise ValueError("matrix must not be empty")
    rows, cols = len(a), len(a[0])
    if any(len(row) != cols for row in a):
        raise ValueError("matrix rows must all have the same length")
    b = [float(v) for v in rhs]
    if len(b) != rows:
        raise ValueError("right-hand side length does not match the matrix")

    largest = max(abs(v) for row in a for v in row)
    threshold = largest * _RELATIVE_THRESHOLD
    order = list(range(cols))
    rank = 0

    for k in range(min(rows, cols)):
        size, pivot_row, pivot_col = max(
            (abs(a[i][j]), i, j) for i in range(k, rows) for j in range(k, cols)
        )
        if size <= threshold or size == 0.0:
            break
        a[k], a[pivot_row] = a[pivot_row], a[k]
        b[k], b[pivot_row] = b[pivot_row], b[k]
        for row in a:
            row[k], row[pivot_col] = row[pivot_col], row[k]
        order[k], order[pivot_col] = order[pivot_col], order[k]

        pivot = a[k]
        for i in range(k + 1, rows):
            factor = a[i][k] / pivot[k]
            if factor:
                a[i] = [x - factor * y for x, y in zip(a[i], pivot)]
                b[i] -= factor * b[k]
        rank += 1

    permuted = [0.0] * cols
    for k in reversed(range(rank)):
        known = sum(a[k][j] * permuted[j] for j in range(k + 1, rank))
        permuted[k] = (b[k] - known) / a[k][k]

    solution = [0.0] * cols
    for position, column in enumerate(order):
        solution[column] = permuted[position]
    return solution


def fit_coefficients(training, resistors):
    """Fit ``phi`` so that ``training @ phi`` best matches ``resistors``.

    Uses least squares through the normal equations. Raises ValueError if
    the number of samples and targets differ.
    """
    samples = [[float(v) for v in row] for row in training]
    targets = [float(v) for v in resistors]
    if not samples or len(samples) != len(targets):
        raise ValueError("need one resistor value per training sample")
    columns = list(zip(*samples))
    gram = [[sum(x * y for x, y in zip(ci, cj)) for cj in columns] for ci in columns]
    moments = [sum(x * y for x, y in zip(column, targets)) for column in columns]
    return solve_full_pivot(gram, moments)


def predict_resistor(voltage, current, phi):
    """Return the predicted resistance ``phi . (voltage, current)``."""
    coefficients = list(phi)
    if len(coefficients) != 2:
        raise ValueError("phi must hold two coefficients")
    return coefficients[0] * voltage + coefficients[1] * current


def main(argv=None):
    """Fit the sample data and print the prediction for the sample reading."""
    phi = fit_coefficients(TRAINING_DATA, RESISTORS)
    predicted = predict_resistor(SAMPLE_VOLTAGE, SAMPLE_CURRENT, phi)
    print(f"Predicted resistor is: {predicted:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())