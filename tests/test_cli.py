import json
import os
import tempfile
import unittest

from app import main


class OfflineCliTests(unittest.TestCase):
    def test_offline_writes_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'plan.json')
            rc = main(['--offline', '--out_json', path, '--restrictions', 'none,lactose-free',
                       '--favorites', 'banana,pizza'])
            self.assertEqual(rc, 0)
            with open(path, encoding='utf-8') as f:
                body = json.load(f)
        # defaults: male, 30y, 175cm, 80kg, sedentary, lose-5kg
        self.assertEqual(body['bmr'], 1749)
        self.assertEqual(body['tdee'], 2099)
        self.assertEqual(body['targetCalories'], 1784)
        self.assertEqual(body['dietFocus'], 'Balanced')
        self.assertEqual(body['restrictions'], ['lactose-free'])
        self.assertEqual(body['favoriteFoods'], ['banana'])
        self.assertEqual(list(body['meals']), ['breakfast', 'morningSnack', 'lunch', 'afternoonSnack', 'dinner'])
        self.assertIn('Your favorites', body['shoppingList'])
        self.assertIn('Dairy', body['shoppingList'])

    def test_offline_writes_pdf(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'plan.pdf')
            self.assertEqual(main(['--offline', '--name', 'Ana', '--sex', 'female', '--out', path]), 0)
            with open(path, 'rb') as f:
                self.assertTrue(f.read().startswith(b'%PDF'))

    def test_offline_invalid_profile_returns_2(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'plan.json')
            self.assertEqual(main(['--offline', '--age', '12', '--out_json', path]), 2)
            self.assertFalse(os.path.exists(path))


if __name__ == '__main__':
    unittest.main()
