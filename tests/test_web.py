import importlib
import os
import re
import unittest
from unittest import mock

from dietplanner import config
from dietplanner.web.app import create_app

FORM = {
    'name': 'Ana', 'age': '30', 'sex': 'female', 'height': '165', 'weight': '70',
    'goal': 'reduce-belly', 'activity_level': 'moderate',
}


class AppTests(unittest.TestCase):
    def setUp(self):
        self.app = create_app({'TESTING': True, 'APP_NAME': 'Daily Diet Test'})
        self.client = self.app.test_client()

    def _generate(self, data=None):
        r = self.client.post('/generate', data=data or FORM)
        self.assertEqual(r.status_code, 200)
        m = re.search(rb"/pdf/([0-9a-f]+)", r.data)
        self.assertIsNotNone(m)
        return r, m.group(1).decode()

    def test_index_ok(self):
        r = self.client.get('/')
        self.assertEqual(r.status_code, 200)
        self.assertIn(b'Daily Diet Test', r.data)
        self.assertIn(b'name="favorites"', r.data)

    def test_generate_renders_plan(self):
        r, _ = self._generate()
        self.assertIn(b'Target:', r.data)
        self.assertIn(b'Anti-inflammatory', r.data)
        self.assertIn(b'Shopping List', r.data)
        self.assertIn(b'Afternoon Snack', r.data)

    def test_generate_get_redirects(self):
        r = self.client.get('/generate')
        self.assertEqual(r.status_code, 302)

    def test_invalid_profile_400(self):
        data = dict(FORM, age='12')
        r = self.client.post('/generate', data=data)
        self.assertEqual(r.status_code, 400)
        self.assertIn(b'between 16 and 100', r.data)

    def test_non_finite_numbers_400(self):
        for key, value in (('age', 'nan'), ('height', 'nan'), ('weight', 'inf'), ('weight', '1e400')):
            r = self.client.post('/generate', data=dict(FORM, **{key: value}))
            self.assertEqual(r.status_code, 400, f'{key}={value}')

    def test_fractional_age_400(self):
        r = self.client.post('/generate', data=dict(FORM, age='16.9'))
        self.assertEqual(r.status_code, 400)
        self.assertIn(b'whole number', r.data)

    def test_tokens_are_random_hex(self):
        _, first = self._generate()
        _, second = self._generate()
        self.assertEqual(len(first), 32)
        self.assertNotEqual(first, second)

    def test_secret_key_only_from_environment(self):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop('FLASK_SECRET_KEY', None)
            importlib.reload(config)
            self.assertIsNone(config.Config.SECRET_KEY)
        with mock.patch.dict(os.environ, {'FLASK_SECRET_KEY': 'from-env'}):
            importlib.reload(config)
            self.assertEqual(config.Config.SECRET_KEY, 'from-env')
        importlib.reload(config)

    def test_pdf_download(self):
        _, token = self._generate()
        r = self.client.get(f'/pdf/{token}')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.mimetype, 'application/pdf')
        self.assertIn('diet-ana.pdf', r.headers['Content-Disposition'])

    def test_plan_json(self):
        data = dict(FORM)
        data['restrictions'] = ['none', 'lactose-free']
        data['favorites'] = ['acai']
        _, token = self._generate(data)
        r = self.client.get(f'/plan/{token}.json')
        self.assertEqual(r.status_code, 200)
        body = r.get_json()
        self.assertEqual(body['restrictions'], ['lactose-free'])
        self.assertEqual(body['favoriteFoods'], ['acai'])
        self.assertEqual(len(body['meals']['lunch']['foods']), 6)
        self.assertIn('Dairy', body['shoppingList'])

    def test_unknown_token_410(self):
        self.assertEqual(self.client.get('/pdf/0000000000').status_code, 410)
        self.assertEqual(self.client.get('/plan/0000000000.json').status_code, 410)

    def test_result_cache_is_bounded(self):
        app = create_app({'TESTING': True, 'RESULT_CACHE_SIZE': 1})
        client = app.test_client()
        first = re.search(rb"/pdf/([0-9a-f]+)", client.post('/generate', data=FORM).data).group(1).decode()
        second = re.search(rb"/pdf/([0-9a-f]+)", client.post('/generate', data=FORM).data).group(1).decode()
        self.assertEqual(client.get(f'/plan/{first}.json').status_code, 410)
        self.assertEqual(client.get(f'/plan/{second}.json').status_code, 200)

    def test_csp_header_when_embed_domain_set(self):
        app = create_app({'TESTING': True, 'ALLOWED_EMBED_DOMAIN': 'https://example.com'})
        r = app.test_client().get('/')
        self.assertEqual(r.headers['Content-Security-Policy'], "frame-ancestors https://example.com 'self'")
        self.assertNotIn('Content-Security-Policy', self.client.get('/').headers)


if __name__ == '__main__':
    unittest.main()
