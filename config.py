import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "supersecretkey")
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_KEY = os.getenv("SUPABASE_KEY")
    SWEAT_RESULTS_TABLE = os.getenv("SWEAT_RESULTS_TABLE", "sweat_results")

    # gemini | groq | openai
    INSIGHT_PROVIDER = os.getenv("INSIGHT_PROVIDER", "gemini").lower()
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "models/gemini-1.5-flash")
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")
    GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    INSIGHT_TEMPERATURE = float(os.getenv("INSIGHT_TEMPERATURE", 0.7))
    INSIGHT_MAX_TOKENS = int(os.getenv("INSIGHT_MAX_TOKENS", 1000))

    PCOS_SCORE_DENOMINATOR = int(os.getenv("PCOS_SCORE_DENOMINATOR", 30))
    ANALYZE_RATE_LIMIT = os.getenv("ANALYZE_RATE_LIMIT", "5 per minute")
