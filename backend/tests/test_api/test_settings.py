"""
Settings API tests
"""

API = "/api/v1/settings"


class TestSettingsApi:

    def test_read_settings(self, client):
        data = client.get(f"{API}/").json()['data']

        assert data['general']['title'] == "Online Tool Shop"
        assert len(data['shipping_methods']) == 3
        assert len(data['payment_methods']) == 2

    def test_page_meta(self, client):
        data = client.get(f"{API}/meta").json()['data']

        assert data['title'] == "Online Tool Shop"

    def test_writes_require_admin(self, client):
        response = client.put(f"{API}/general", json={"title": "Hijacked"})

        assert response.status_code == 403

    def test_update_general_syncs_meta(self, admin_client):
        body = admin_client.put(f"{API}/general", json={
            "title": "Tool Hub", "description": "Every tool", "icon": "", "favicon": "",
        }).json()

        assert body['meta']['title'] == "Tool Hub"
        assert admin_client.get(f"{API}/meta").json()['data']['description'] == "Every tool"

    def test_update_footer(self, admin_client):
        body = admin_client.put(f"{API}/footer", json={"about_us": "Since 1990"}).json()

        assert body['data']['footer']['about_us'] == "Since 1990"

    def test_shipping_methods(self, admin_client):
        created = admin_client.post(f"{API}/shipping-methods", json={"name": "Pickup", "cost": 0})
        assert created.status_code == 201
        method_id = created.json()['data']['id']

        updated = admin_client.put(f"{API}/shipping-methods/{method_id}", json={
            "id": method_id, "name": "Store Pickup", "cost": 0,
        })
        assert updated.status_code == 200

        assert admin_client.delete(f"{API}/shipping-methods/{method_id}").status_code == 200
        assert admin_client.delete(f"{API}/shipping-methods/{method_id}").status_code == 404

    def test_update_unknown_shipping_method(self, admin_client):
        response = admin_client.put(f"{API}/shipping-methods/77", json={"id": 77, "name": "X", "cost": 1})

        assert response.status_code == 404

    def test_payment_methods(self, admin_client):
        created = admin_client.post(f"{API}/payment-methods", json={"name": "Cash"})
        method_id = created.json()['data']['id']

        mismatch = admin_client.put(f"{API}/payment-methods/1", json={"id": method_id, "name": "Cash"})
        assert mismatch.status_code == 400

        names = [m['name'] for m in admin_client.get(f"{API}/").json()['data']['payment_methods']]
        assert names == ["Online Payment", "Card to Card", "Cash"]
