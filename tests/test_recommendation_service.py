import pytest

from db.models import Allergy, Ingredient, Restaurant
from services.recommendation_service import recommend_dishes


@pytest.fixture
def catalog(make_tag, make_dish, db_session):
    gluten = make_tag(Allergy, "Gluten")
    milk = make_tag(Allergy, "Milk")
    nuts = make_tag(Allergy, "Nuts")
    onion = make_tag(Ingredient, "Onion")
    garlic = make_tag(Ingredient, "Garlic")

    sushi_bar = Restaurant(name="Sushi Bar", email="sushi@example.com", phone="0507654321")
    db_session.add(sushi_bar)
    db_session.commit()

    dishes = {
        "margherita": make_dish("Margherita", allergies=[gluten, milk], description="Tomato and mozzarella"),
        "pesto": make_dish("Pesto Pasta", allergies=[gluten, milk, nuts], ingredients=[garlic]),
        "bread": make_dish("Bread Basket", allergies=[gluten]),
        "soup": make_dish("Onion Soup", allergies=[gluten, milk], ingredients=[onion]),
        "salad": make_dish("Green Salad"),
        "roll": make_dish("Tempura Roll", allergies=[gluten, milk], owner=sushi_bar),
    }
    return {
        "gluten": gluten, "milk": milk, "nuts": nuts,
        "onion": onion, "garlic": garlic, "dishes": dishes,
    }


def names(dishes):
    return sorted(dish.name for dish in dishes)


def assert_recommendation_rule(dishes, user):
    allergy_ids = {allergy.id for allergy in user.allergies}
    disliked_ids = {ingredient.id for ingredient in user.ingredients}
    for dish in dishes:
        assert allergy_ids <= {allergy.id for allergy in dish.allergies}
        assert not disliked_ids & {ingredient.id for ingredient in dish.ingredients}


def test_user_with_allergies_gets_dishes_tagged_with_all_of_them(db_session, make_user, catalog):
    user = make_user(allergies=[catalog["gluten"], catalog["milk"]], ingredients=[catalog["onion"]])

    dishes = recommend_dishes(db_session, user)

    assert names(dishes) == ["Margherita", "Pesto Pasta", "Tempura Roll"]
    assert_recommendation_rule(dishes, user)


def test_single_allergy_without_dislikes(db_session, make_user, catalog):
    user = make_user(allergies=[catalog["nuts"]])

    dishes = recommend_dishes(db_session, user)

    assert names(dishes) == ["Pesto Pasta"]


def test_disliked_ingredients_are_excluded(db_session, make_user, catalog):
    user = make_user(allergies=[catalog["gluten"]], ingredients=[catalog["garlic"], catalog["onion"]])

    dishes = recommend_dishes(db_session, user)

    assert names(dishes) == ["Bread Basket", "Margherita", "Tempura Roll"]
    assert_recommendation_rule(dishes, user)


def test_user_without_allergies_only_gets_dishes_linked_to_their_allergies(db_session, make_user, catalog):
    user = make_user(ingredients=[catalog["garlic"]])

    # No allergy links back to the user, so nothing qualifies
    assert recommend_dishes(db_session, user) == []


def test_search_matches_name_description_and_restaurant(db_session, make_user, catalog):
    user = make_user(allergies=[catalog["gluten"], catalog["milk"]])

    assert names(recommend_dishes(db_session, user, search="sushi")) == ["Tempura Roll"]
    assert names(recommend_dishes(db_session, user, search="MOZZARELLA")) == ["Margherita"]
    assert names(recommend_dishes(db_session, user, search="pesto")) == ["Pesto Pasta"]
    assert recommend_dishes(db_session, user, search="nothing like this") == []


def test_search_treats_wildcards_literally(db_session, make_user, make_dish, catalog):
    make_dish("Half_Price Bread", allergies=[catalog["gluten"]])
    user = make_user(allergies=[catalog["gluten"]])

    assert names(recommend_dishes(db_session, user, search="_")) == ["Half_Price Bread"]
    assert names(recommend_dishes(db_session, user, search="f_p")) == ["Half_Price Bread"]
    assert recommend_dishes(db_session, user, search="%") == []
    assert recommend_dishes(db_session, user, search="\\") == []


def test_pagination(db_session, make_user, make_tag, make_dish):
    gluten = make_tag(Allergy, "Gluten")
    for index in range(10):
        make_dish(f"Dish {index}", allergies=[gluten])
    user = make_user(allergies=[gluten])

    first_page = recommend_dishes(db_session, user, page=1)
    second_page = recommend_dishes(db_session, user, page=2)

    assert len(first_page) == 8
    assert len(second_page) == 2
    assert not {dish.id for dish in first_page} & {dish.id for dish in second_page}
    assert recommend_dishes(db_session, user, page=3) == []


def test_user_dishes_endpoint(client, make_user, auth_headers, catalog):
    user = make_user(allergies=[catalog["gluten"], catalog["milk"]], ingredients=[catalog["onion"]])

    response = client.get("/dishes/user", headers=auth_headers(user))

    assert response.status_code == 200
    body = response.json()
    assert sorted(dish["name"] for dish in body) == ["Margherita", "Pesto Pasta", "Tempura Roll"]
    margherita = next(dish for dish in body if dish["name"] == "Margherita")
    assert margherita["restaurant"]["name"] == "Pasta House"
    assert sorted(tag["name"] for tag in margherita["allergies"]) == ["Gluten", "Milk"]
    assert margherita["price"] == 42.5


def test_user_dishes_endpoint_page_defaults(client, make_user, auth_headers, make_tag, make_dish):
    gluten = make_tag(Allergy, "Gluten")
    for index in range(10):
        make_dish(f"Dish {index}", allergies=[gluten])
    headers = auth_headers(make_user(allergies=[gluten]))

    first_page = client.get("/dishes/user", headers=headers).json()
    for page in ("0", "-3", "abc", "1"):
        assert client.get("/dishes/user", params={"page": page}, headers=headers).json() == first_page
    assert len(client.get("/dishes/user", params={"page": 2}, headers=headers).json()) == 2


def test_user_dishes_requires_token(client):
    assert client.get("/dishes/user").status_code == 401
