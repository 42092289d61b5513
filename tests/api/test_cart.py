async def test_add_to_cart(client, user, products):
    response = await client.post("/cart", json={
        "userId": user.id,
        "productId": products[0].id,
        "quantity": 2
    })

    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert data["userId"] == user.id
    assert data["productId"] == products[0].id
    assert data["quantity"] == 2


async def test_add_then_list(client, user, products):
    created = await client.post("/cart", json={
        "userId": user.id,
        "productId": products[1].id,
        "quantity": 1
    })

    response = await client.get(f"/cart/{user.id}")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [created.json()["id"]]


async def test_repeated_adds_are_not_merged(client, user, products):
    body = {"userId": user.id, "productId": products[0].id, "quantity": 1}
    await client.post("/cart", json=body)
    await client.post("/cart", json=body)

    response = await client.get(f"/cart/{user.id}")

    assert len(response.json()) == 2


async def test_list_cart_only_returns_own_items(client, user, products):
    await client.post("/cart", json={"userId": user.id, "productId": products[0].id, "quantity": 1})
    await client.post("/cart", json={"userId": user.id + 1, "productId": products[0].id, "quantity": 3})

    response = await client.get(f"/cart/{user.id}")

    assert [item["userId"] for item in response.json()] == [user.id]


async def test_add_to_cart_accepts_unknown_ids(client):
    """Caller-supplied ids are trusted."""
    response = await client.post("/cart", json={"userId": 77, "productId": 88, "quantity": 1})

    assert response.status_code == 201


async def test_add_to_cart_missing_quantity(client, user, products):
    response = await client.post("/cart", json={"userId": user.id, "productId": products[0].id})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}


async def test_remove_from_cart(client, user, products):
    created = await client.post("/cart", json={
        "userId": user.id,
        "productId": products[0].id,
        "quantity": 2
    })
    item_id = created.json()["id"]

    response = await client.delete(f"/cart/{item_id}")

    assert response.status_code == 204
    assert response.content == b""

    remaining = await client.get(f"/cart/{user.id}")
    assert item_id not in [item["id"] for item in remaining.json()]


async def test_remove_nonexistent_cart_item(client):
    response = await client.delete("/cart/12345")

    assert response.status_code == 404
    assert response.json()["detail"] == "Cart item not found"


async def test_remove_twice(client, user, products):
    created = await client.post("/cart", json={"userId": user.id, "productId": products[0].id, "quantity": 1})
    item_id = created.json()["id"]

    assert (await client.delete(f"/cart/{item_id}")).status_code == 204
    assert (await client.delete(f"/cart/{item_id}")).status_code == 404


async def test_remove_non_numeric_cart_item(client):
    response = await client.delete("/cart/abc")

    assert response.status_code == 404
    assert response.json()["detail"] == "Cart item not found"


async def test_list_cart_non_numeric_user(client, user, products):
    await client.post("/cart", json={"userId": user.id, "productId": products[0].id, "quantity": 1})

    response = await client.get("/cart/abc")

    assert response.status_code == 200
    assert response.json() == []


async def test_add_to_cart_wrong_type_hides_input(client, user, products):
    response = await client.post("/cart", json={
        "userId": user.id,
        "productId": products[0].id,
        "quantity": "lots-of-them"
    })

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert "lots-of-them" not in response.text
