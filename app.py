# Imports

# General
import os
import logging

from logging.handlers import RotatingFileHandler
from datetime import datetime
from dotenv import load_dotenv

# =====================================================
# ENV & LOGGING SETUP
# =====================================================

# .env must be loaded before the config module reads the environment
load_dotenv(".env")

from fastapi import FastAPI

from render_config import CFG
from text2png import router as text2png_router

# Create logs dir
os.makedirs(CFG.log_dir, exist_ok=True)

# Proper logging config (only once!)
logger = logging.getLogger("text2png")
logger.setLevel(CFG.log_level)

if not logger.handlers:
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")

    # File handler (rotating)
    file_handler = RotatingFileHandler(os.path.join(CFG.log_dir, "app.log"), maxBytes=10_485_760, backupCount=5)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Silence noisy libraries
for noisy in ("PIL", "multipart"):
    logging.getLogger(noisy).setLevel(logging.WARNING)

if not CFG.fonts_dir.is_dir():
    logger.warning("FONTS_DIR %s does not exist - every render will fail until fonts are installed", CFG.fonts_dir)

logger.info("Application starting up... fonts from %s", CFG.fonts_dir)

# =====================================================
# FASTAPI APP
# =====================================================

app = FastAPI(title="text2png", version="1.0")
app.include_router(text2png_router)

# =====================================================
# ENDPOINTS
# =====================================================

@app.get("/")
async def home():
    return {"message": "text2png server is up!", "time": datetime.now().isoformat()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")), reload=True)
