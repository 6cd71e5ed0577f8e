"""
Run with: python -m bezierbeauty
"""
from bezierbeauty.main import main

if __name__ == "__main__":
    main()
