import sys
import traceback

print("🚀 Gunicorn: Starting Yield Estimator WSGI Server...")
try:
    from app import app
    print("✅ Flask app imported successfully")
except Exception:
    print("❌ CRITICAL ERROR importing app:")
    print(traceback.format_exc())
    sys.exit(1)

if __name__ == "__main__":
    app.run()
