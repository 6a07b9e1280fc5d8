import os
import sys
import unittest

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from db.models import CartLine  # noqa: E402
from utils import cart as cart_ops  # noqa: E402


def _names(cart):
    return [line.name for line in cart]


class CartOperationsTestCase(unittest.TestCase):
    # ---------- add_item ----------

    def test_add_item_appends_new_line(self):
        cart = cart_ops.add_item((), "Phone", 799)
        self.assertEqual(cart, (CartLine("Phone", 799, 1),))

    def test_add_item_twice_merges_into_one_line(self):
        cart = cart_ops.add_item((), "Phone", 799)
        cart = cart_ops.add_item(cart, "Phone", 799)
        self.assertEqual(cart, (CartLine(name="Phone", price=799, quantity=2),))

    def test_add_item_keeps_first_seen_price(self):
        cart = cart_ops.add_item((), "Jeans", 30)
        cart = cart_ops.add_item(cart, "Jeans", 25)
        self.assertEqual(cart[0].price, 30)
        self.assertEqual(cart[0].quantity, 2)

    def test_add_item_preserves_order(self):
        cart = ()
        for name, price in [("Phone", 799), ("Jeans", 30), ("sunscreen", 15)]:
            cart = cart_ops.add_item(cart, name, price)
        cart = cart_ops.add_item(cart, "Phone", 799)
        self.assertEqual(_names(cart), ["Phone", "Jeans", "sunscreen"])
        self.assertEqual(cart[0].quantity, 2)

    def test_add_item_does_not_modify_input(self):
        original = (CartLine("Phone", 799, 1),)
        cart_ops.add_item(original, "Phone", 799)
        self.assertEqual(original, (CartLine("Phone", 799, 1),))

    # ---------- change_quantity ----------

    def test_change_quantity_up_and_down(self):
        cart = (CartLine("Phone", 799, 1), CartLine("Jeans", 30, 3))
        cart = cart_ops.change_quantity(cart, "Jeans", 1)
        self.assertEqual(cart[1].quantity, 4)
        cart = cart_ops.change_quantity(cart, "Jeans", -2)
        self.assertEqual(cart[1].quantity, 2)
        self.assertEqual(_names(cart), ["Phone", "Jeans"])

    def test_change_quantity_to_zero_removes_line(self):
        cart = (CartLine("Phone", 799, 1), CartLine("Jeans", 30, 1))
        cart = cart_ops.change_quantity(cart, "Phone", -1)
        self.assertEqual(_names(cart), ["Jeans"])

    def test_change_quantity_below_zero_removes_line(self):
        cart = (CartLine("Phone", 799, 2),)
        self.assertEqual(cart_ops.change_quantity(cart, "Phone", -10), ())

    def test_change_quantity_large_delta(self):
        cart = (CartLine("T-Shirt", 20, 1),)
        cart = cart_ops.change_quantity(cart, "T-Shirt", 41)
        self.assertEqual(cart[0].quantity, 42)

    def test_change_quantity_zero_delta_is_noop(self):
        cart = (CartLine("T-Shirt", 20, 2),)
        self.assertEqual(cart_ops.change_quantity(cart, "T-Shirt", 0), cart)

    def test_change_quantity_unknown_name_is_noop(self):
        cart = (CartLine("Phone", 799, 1),)
        self.assertEqual(cart_ops.change_quantity(cart, "Laptop", -1), cart)
        self.assertEqual(cart_ops.change_quantity((), "Laptop", 1), ())

    def test_change_quantity_rejects_non_integer_delta(self):
        cart = (CartLine("Phone", 799, 1),)
        with self.assertRaises(TypeError):
            cart_ops.change_quantity(cart, "Phone", 0.5)
        with self.assertRaises(TypeError):
            cart_ops.change_quantity(cart, "Phone", True)

    # ---------- remove / clear / helpers ----------

    def test_remove_item(self):
        cart = (CartLine("Phone", 799, 4), CartLine("Jeans", 30, 1))
        self.assertEqual(_names(cart_ops.remove_item(cart, "Phone")), ["Jeans"])
        self.assertEqual(cart_ops.remove_item(cart, "Laptop"), cart)

    def test_clear(self):
        cart = (CartLine("Phone", 799, 4), CartLine("Jeans", 30, 1))
        self.assertEqual(cart_ops.clear(cart), ())

    def test_find_line_and_item_count(self):
        cart = (CartLine("Phone", 799, 4), CartLine("Jeans", 30, 1))
        self.assertEqual(cart_ops.find_line(cart, "Jeans"), CartLine("Jeans", 30, 1))
        self.assertIsNone(cart_ops.find_line(cart, "Laptop"))
        self.assertEqual(cart_ops.item_count(cart), 5)
        self.assertEqual(cart_ops.item_count(()), 0)

    # ---------- invariants over a mixed sequence ----------

    def test_names_unique_and_quantities_positive(self):
        steps = [
            ("add", "Phone", 799),
            ("add", "Jeans", 30),
            ("add", "Phone", 799),
            ("delta", "Jeans", -1),
            ("add", "Jeans", 30),
            ("delta", "Phone", -5),
            ("add", "sunscreen", 15),
            ("delta", "sunscreen", 3),
            ("add", "Phone", 799),
            ("delta", "Jeans", -1),
            ("delta", "missing", 2),
        ]
        cart = ()
        for op, name, arg in steps:
            if op == "add":
                cart = cart_ops.add_item(cart, name, arg)
            else:
                cart = cart_ops.change_quantity(cart, name, arg)
            names = _names(cart)
            self.assertEqual(len(names), len(set(names)))
            self.assertTrue(all(line.quantity >= 1 for line in cart))

        self.assertEqual(
            cart, (CartLine("sunscreen", 15, 4), CartLine("Phone", 799, 1))
        )


if __name__ == "__main__":
    unittest.main()
