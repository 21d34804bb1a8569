from db.models import Allergy, Dish, Ingredient, User


def test_list_allergies_is_public(client, make_tag):
    make_tag(Allergy, "Gluten")
    make_tag(Allergy, "Milk")
    response = client.get("/allergies")
    assert response.status_code == 200
    assert [allergy["name"] for allergy in response.json()] == ["Gluten", "Milk"]


def test_create_allergy(client, admin_headers, db_session):
    response = client.post("/allergies", json={"name": "  Sesame "}, headers=admin_headers)
    assert response.status_code == 201
    assert response.json() == {"message": "Allergy added successfully"}
    assert db_session.query(Allergy).filter(Allergy.name == "Sesame").count() == 1


def test_create_allergy_duplicate(client, admin_headers, make_tag):
    make_tag(Allergy, "Sesame")
    response = client.post("/allergies", json={"name": "Sesame"}, headers=admin_headers)
    assert response.status_code == 409
    assert response.json() == {"message": "Allergy already exists"}


def test_create_allergy_validation(client, admin_headers):
    response = client.post("/allergies", json={"name": "S"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json() == {"message": ["Allergy name must contain at least 2 characters"]}

    response = client.post("/allergies", json={"name": "Sesame 42"}, headers=admin_headers)
    assert response.json() == {"message": ["Allergy name can only contain letters and spaces"]}

    response = client.post("/allergies", json={"name": "שומשום"}, headers=admin_headers)
    assert response.status_code == 201


def test_create_allergy_requires_admin(client, make_user, auth_headers):
    response = client.post("/allergies", json={"name": "Sesame"}, headers=auth_headers(make_user()))
    assert response.status_code == 403
    assert response.json() == {"message": "Admin permission required"}
    assert client.post("/allergies", json={"name": "Sesame"}).status_code == 401


def test_get_and_update_allergy(client, admin_headers, make_tag):
    gluten = make_tag(Allergy, "Gluten")
    make_tag(Allergy, "Milk")

    assert client.get(f"/allergies/{gluten.id}").json() == {"id": gluten.id, "name": "Gluten"}
    assert client.get("/allergies/9999").status_code == 404

    response = client.put(f"/allergies/{gluten.id}", json={"name": "Wheat"}, headers=admin_headers)
    assert response.status_code == 200
    assert client.get(f"/allergies/{gluten.id}").json()["name"] == "Wheat"

    response = client.put(f"/allergies/{gluten.id}", json={"name": "Milk"}, headers=admin_headers)
    assert response.status_code == 409

    response = client.put("/allergies/9999", json={"name": "Eggs"}, headers=admin_headers)
    assert response.status_code == 404


def test_allergies_page_search(client, admin_headers, make_tag):
    for name in ["Gluten", "Milk", "Nuts", "Peanuts"]:
        make_tag(Allergy, name)
    response = client.get("/allergies/page", params={"search": "nut"}, headers=admin_headers)
    assert [allergy["name"] for allergy in response.json()] == ["Nuts", "Peanuts"]

    response = client.get("/allergies/page", params={"search": "%"}, headers=admin_headers)
    assert response.json() == []


def test_delete_allergy_removes_references(client, admin_headers, make_tag, make_user, make_dish, db_session):
    gluten = make_tag(Allergy, "Gluten")
    milk = make_tag(Allergy, "Milk")
    user = make_user(allergies=[gluten, milk])
    other = make_user(allergies=[gluten])
    dish = make_dish("Margherita", allergies=[gluten, milk])
    gluten_id = gluten.id

    response = client.delete(f"/allergies/{gluten_id}", headers=admin_headers)
    assert response.status_code == 200

    db_session.expire_all()
    assert db_session.get(Allergy, gluten_id) is None
    assert [allergy.name for allergy in db_session.get(User, user.id).allergies] == ["Milk"]
    assert db_session.get(User, other.id).allergies == []
    assert [allergy.name for allergy in db_session.get(Dish, dish.id).allergies] == ["Milk"]

    assert client.delete(f"/allergies/{gluten_id}", headers=admin_headers).status_code == 404


def test_list_ingredients_requires_user(client, make_user, auth_headers, make_tag):
    make_tag(Ingredient, "Onion")
    assert client.get("/ingredients").status_code == 401
    response = client.get("/ingredients", headers=auth_headers(make_user()))
    assert response.json() == [{"id": 1, "name": "Onion"}]


def test_ingredient_crud(client, admin_headers):
    assert client.post("/ingredients", json={"name": "Onion"}, headers=admin_headers).status_code == 201
    assert client.post("/ingredients", json={"name": "Onion"}, headers=admin_headers).status_code == 409

    ingredient_id = client.get("/ingredients", headers=admin_headers).json()[0]["id"]
    assert client.get(f"/ingredients/{ingredient_id}", headers=admin_headers).json()["name"] == "Onion"

    response = client.put(f"/ingredients/{ingredient_id}", json={"name": "Red Onion"}, headers=admin_headers)
    assert response.status_code == 200
    assert client.get("/ingredients/page", params={"search": "red"}, headers=admin_headers).json() == [
        {"id": ingredient_id, "name": "Red Onion"}
    ]


def test_delete_ingredient_removes_references(client, admin_headers, make_tag, make_user, make_dish, db_session):
    onion = make_tag(Ingredient, "Onion")
    user = make_user(ingredients=[onion])
    dish = make_dish("Onion Soup", ingredients=[onion])

    response = client.delete(f"/ingredients/{onion.id}", headers=admin_headers)
    assert response.status_code == 200

    db_session.expire_all()
    assert db_session.query(Ingredient).count() == 0
    assert db_session.get(User, user.id).ingredients == []
    assert db_session.get(Dish, dish.id).ingredients == []
