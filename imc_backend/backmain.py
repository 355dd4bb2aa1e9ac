from fastapi import FastAPI
from imc_backend.routers import rou_auth, rou_user, rou_bmi
from imc_backend.configuration.monitor import instrument_fastapi
from imc_backend.validators.val_errors import register_exception_handlers

app = FastAPI(
    title="IMC App API",
    description="API for authentication, users and BMI (IMC) calculation",
    version="1.0.0"
)

# Include all routers
app.include_router(rou_auth.router)  # Auth routes should typically be first
app.include_router(rou_user.router)
app.include_router(rou_bmi.router)

# Validation failures are answered with 400 and a list of field errors
register_exception_handlers(app)

# Instrument app with Azure Monitor
instrument_fastapi(app)

if __name__ == '__main__':
    import uvicorn
    uvicorn.run(app, host='0.0.0.0', port=8000)
