"""Built-in example texts for the "Load Example" action"""

from __future__ import annotations

from models.compare import ExamplePair

EXAMPLE_OLD_CODE = """function calculateTotal(items) {
  return items
    .map(item => item.price * item.quantity)
    .reduce((a, b) => a + b, 0);
}

// Log the result
console.log("The total is: " + calculateTotal(items));"""

EXAMPLE_NEW_CODE = """function calculateTotal(items) {
  // Add tax calculation
  return items
    .map(item => item.price * item.quantity * 1.1)
    .reduce((a, b) => a + b, 0);
}

// Format currency
const formatCurrency = (amount) => {
  return "$" + amount.toFixed(2);
};

// Log the result with formatting
console.log("The total is: " + formatCurrency(calculateTotal(items)));"""


def get_example() -> ExamplePair:
    """Get the example pair"""
    return ExamplePair(
        name="calculate-total",
        old_text=EXAMPLE_OLD_CODE,
        new_text=EXAMPLE_NEW_CODE,
    )
