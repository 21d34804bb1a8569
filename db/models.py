import enum

from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey, DateTime, Enum, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


class UserRole(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


# Many-to-many link tables
user_allergies = Table(
    "user_allergies",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("allergy_id", Integer, ForeignKey("allergies.id", ondelete="CASCADE"), primary_key=True),
)

user_ingredients = Table(
    "user_ingredients",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("ingredient_id", Integer, ForeignKey("ingredients.id", ondelete="CASCADE"), primary_key=True),
)

dish_allergies = Table(
    "dish_allergies",
    Base.metadata,
    Column("dish_id", Integer, ForeignKey("dishes.id", ondelete="CASCADE"), primary_key=True),
    Column("allergy_id", Integer, ForeignKey("allergies.id", ondelete="CASCADE"), primary_key=True),
)

dish_ingredients = Table(
    "dish_ingredients",
    Base.metadata,
    Column("dish_id", Integer, ForeignKey("dishes.id", ondelete="CASCADE"), primary_key=True),
    Column("ingredient_id", Integer, ForeignKey("ingredients.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.USER)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    allergies = relationship("Allergy", secondary=user_allergies, back_populates="users")
    # Ingredients the user does not want in a dish
    ingredients = relationship("Ingredient", secondary=user_ingredients, back_populates="users")
    pending_ingredients = relationship(
        "PendingIngredient",
        back_populates="user",
        cascade="all, delete-orphan"
    )


class Allergy(Base):
    __tablename__ = "allergies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)

    users = relationship("User", secondary=user_allergies, back_populates="allergies")
    dishes = relationship("Dish", secondary=dish_allergies, back_populates="allergies")


class Ingredient(Base):
    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)

    users = relationship("User", secondary=user_ingredients, back_populates="ingredients")
    dishes = relationship("Dish", secondary=dish_ingredients, back_populates="ingredients")


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=False)

    dishes = relationship("Dish", back_populates="restaurant", cascade="all, delete-orphan")


class Dish(Base):
    __tablename__ = "dishes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    image = Column(String(1024), nullable=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False)

    # Relationships
    restaurant = relationship("Restaurant", back_populates="dishes")
    # Allergies the dish triggers
    allergies = relationship("Allergy", secondary=dish_allergies, back_populates="dishes")
    # Ingredients the dish contains
    ingredients = relationship("Ingredient", secondary=dish_ingredients, back_populates="dishes")


class PendingIngredient(Base):
    __tablename__ = "pending_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="pending_ingredients")
