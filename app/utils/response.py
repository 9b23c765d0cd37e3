from typing import Dict


def error_response(message: str) -> Dict[str, str]:
    """Error body shared by every failing request.

    Structure:
    {
      "error": "missing station"
    }
    """
    return {"error": message}
