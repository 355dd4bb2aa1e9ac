import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    # Azure CosmosDB Configuration
    COSMOSDB_ENDPOINT = os.getenv("COSMOS_DB_ENDPOINT")
    COSMOSDB_KEY = os.getenv("COSMOS_DB_KEY")
    COSMOSDB_DATABASE_NAME = os.getenv("COSMOS_DB_DATABASE")
    COSMOSDB_CONTAINER_NAME = {
        "users": os.getenv("COSMOS_CONTAINERS_USERS", "users"),
        "bmi_records": os.getenv("COSMOS_CONTAINERS_BMI_RECORDS", "bmi_records")
    }

    # JWT Configuration (access and refresh tokens must use different secrets)
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_ACCESS_SECRET = os.getenv("JWT_ACCESS_SECRET")
    JWT_ACCESS_EXPIRATION_MINUTES = int(os.getenv("JWT_ACCESS_EXPIRATION_MINUTES", "15"))
    JWT_REFRESH_SECRET = os.getenv("JWT_REFRESH_SECRET")
    JWT_REFRESH_EXPIRATION_MINUTES = int(os.getenv("JWT_REFRESH_EXPIRATION_MINUTES", "1440"))

    # Password hashing
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Application Insights
    APPLICATIONINSIGHTS_CONNECTION_STRING = os.getenv("APPINSIGHTS_CONNECTION_STRING")
