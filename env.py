import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Environment variables for the Menu Recommender API
PORT = int(os.getenv("PORT", 5000))

# pg db url
DATABASE_URL = os.getenv("DATABASE_URL", None)

# JWT Secret Key
SECRET_KEY = os.getenv("SECRET_KEY", "6f1c2b8e9d0a4f3e7b5c1d2e8f9a0b3c")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", 7))

# SMTP settings for verification emails
EMAIL_HOST = os.getenv("EMAIL_HOST", None)
EMAIL_PORT = int(os.getenv("EMAIL_PORT", 587))
EMAIL_USER = os.getenv("EMAIL_USER", None)
EMAIL_PASS = os.getenv("EMAIL_PASS", None)
EMAIL_FROM = os.getenv("EMAIL_FROM", None)

# Image hosting keys
CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME", None)
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY", None)
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET", None)
CLOUDINARY_FOLDER = os.getenv("CLOUDINARY_FOLDER", "weekly")

# Scratch directory for converted images
UPLOAD_TEMP_DIR = os.getenv("UPLOAD_TEMP_DIR", "temp")

# app settings
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
LOG_FILE = os.getenv("LOG_FILE", "menu_recommender.log")

# Page sizes for paginated listings
DEFAULT_PAGE_SIZE = 12
DISH_PAGE_SIZE = 8


def check_required_env():
    """Raise if a variable the running server cannot do without is missing."""
    required_env_vars = {
        "DATABASE_URL": DATABASE_URL,
        "EMAIL_HOST": EMAIL_HOST,
        "EMAIL_FROM": EMAIL_FROM,
        "CLOUDINARY_CLOUD_NAME": CLOUDINARY_CLOUD_NAME,
        "CLOUDINARY_API_KEY": CLOUDINARY_API_KEY,
        "CLOUDINARY_API_SECRET": CLOUDINARY_API_SECRET,
    }

    for var in required_env_vars.keys():
        if required_env_vars[var] is None:
            raise ValueError(f"Environment variable {var} is not set. Please set it in the .env file.")
