import os
import sys
import logging

from dotenv import load_dotenv

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load env variables (simulate app.py behavior)
load_dotenv()

# Ensure backend dir is in path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from jugbfs.llm.explainer import (
    EMPTY_RESPONSE_MESSAGE,
    FAILURE_MESSAGE,
    GENAI_MODEL,
    explain_solution,
    genai_client,
)
from jugbfs.search.bfs import search


def check_genai():
    print(f"GOOGLE_API_KEY from env: {'Set' if os.getenv('GOOGLE_API_KEY') else 'Not Set'}")
    print(f"GEMINI_API_KEY from env: {'Set' if os.getenv('GEMINI_API_KEY') else 'Not Set'}")
    print(f"Target Model: {GENAI_MODEL}")

    if genai_client is None:
        print("FAILURE: No API key found")
        return False

    path = search(4, 3, 2)
    print("Testing explanation for the 4L/3L/2L puzzle...")
    text = explain_solution(4, 3, 2, path)
    print(f"Explanation: {text}")
    return text not in (FAILURE_MESSAGE, EMPTY_RESPONSE_MESSAGE)


if __name__ == "__main__":
    sys.exit(0 if check_genai() else 1)
