from nextstep.site import models


def add_link(client, headers, platform, url="https://example.com"):
    resp = client.post("/admin/social-links", json={"platform": platform, "url": url}, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_social_links_append_in_order(client, admin_headers):
    first = add_link(client, admin_headers, "LinkedIn")
    second = add_link(client, admin_headers, "YouTube")
    assert (first["order_index"], second["order_index"]) == (0, 1)
    assert first["is_active"] is True


def test_social_link_requires_platform_and_url(client, admin_headers):
    resp = client.post("/admin/social-links", json={"platform": "X", "url": " "}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Platform and URL are required."


def test_deleting_leaves_gap(client, admin_headers):
    add_link(client, admin_headers, "A")
    middle = add_link(client, admin_headers, "B")
    add_link(client, admin_headers, "C")

    assert client.delete(f"/admin/social-links/{middle['id']}", headers=admin_headers).status_code == 200
    indices = [link["order_index"] for link in client.get("/admin/social-links", headers=admin_headers).json()]
    assert indices == [0, 2]
    assert add_link(client, admin_headers, "D")["order_index"] == 3


def test_toggle_hides_link_from_public_feed(client, admin_headers):
    link = add_link(client, admin_headers, "Facebook")
    add_link(client, admin_headers, "Instagram")

    toggled = client.post(f"/admin/social-links/{link['id']}/toggle", headers=admin_headers)
    assert toggled.json()["is_active"] is False

    platforms = [s["platform"] for s in client.get("/site").json()["social_links"]]
    assert platforms == ["Instagram"]


def test_site_config_created_then_updated(client, admin_headers):
    assert client.get("/admin/site-config", headers=admin_headers).json() is None

    created = client.put(
        "/admin/site-config",
        json={"site_name": "", "email": "hello@example.com", "mobile_no": " "},
        headers=admin_headers,
    ).json()
    assert created["site_name"] == "NextStep Guidance"
    assert created["mobile_no"] is None

    updated = client.put(
        "/admin/site-config",
        json={"site_name": "NextStep", "address": "1 Main St"},
        headers=admin_headers,
    ).json()
    assert updated["id"] == created["id"]
    assert updated["site_name"] == "NextStep"
    assert updated["email"] is None


def test_site_config_is_admin_only(client, user_headers):
    assert client.put("/admin/site-config", json={}, headers=user_headers).status_code == 403


def test_marketing_feed(client, db):
    db.add_all([
        models.FAQ(question="How?", answer="Like this.", order_index=1),
        models.FAQ(question="Why?", answer="Because.", order_index=0),
        models.FAQ(question="Old?", answer="Hidden.", is_active=False, order_index=2),
    ])
    db.add_all([
        models.Testimonial(client_name=f"Client {i}", content="Great", is_featured=True, order_index=i)
        for i in range(4)
    ])
    db.add(models.Testimonial(client_name="Quiet", content="Fine", is_featured=False))
    db.commit()

    resp = client.get("/site")
    assert resp.status_code == 200
    data = resp.json()
    assert [f["question"] for f in data["faqs"]] == ["Why?", "How?"]
    assert [t["client_name"] for t in data["testimonials"]] == ["Client 0", "Client 1", "Client 2"]
    assert data["social_links"] == []
    assert data["site_config"] is None


def test_site_config_read_reports_storage_failure(client, admin_headers, monkeypatch):
    def broken(db):
        raise RuntimeError("connection lost")

    monkeypatch.setattr("nextstep.site.routes.get_site_config", broken)
    resp = client.get("/admin/site-config", headers=admin_headers)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to load site config"
