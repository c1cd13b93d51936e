# enrollment/main.py
import logging
from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
from .database.base import Base
from .database.session import engine, get_db
from .config import settings
from .errors import NotFoundError, PersistenceError, ValidationError
from .routers import students

# Import all models to ensure they're registered with Base
from .database.models.student import Student, StudentCourse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Student Enrollment Records",
    description="Create, update, delete and search student enrollment records",
    version="1.0.0"
)

# CORS middleware for the admin frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create all database tables
Base.metadata.create_all(bind=engine)

app.include_router(students.router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid student record",
            "defects": [defect.to_dict() for defect in exc.defects]
        }
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": "Student not found"})


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    # Details were already logged by the repository
    return JSONResponse(status_code=500, content={"message": "Server Error", "error": str(exc)})


@app.get("/")
def root():
    return {
        "status": "ok",
        "service": "Student Enrollment Records API",
        "version": "1.0.0"
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {
        "status": "healthy",
        "database": "connected"
    }

#   cd backend
#   python -m uvicorn enrollment.main:app --reload
#   API docs (interactive): http://127.0.0.1:8000/docs
