#!/usr/bin/env python3
"""
Simple Bank Entry Point

Starts the interactive console banking application.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from simple_bank.console import main


if __name__ == "__main__":
    print("🏦 Starting Simple Bank...")
    print("🧾 Deposits, withdrawals and transfers are logged below as they happen")

    try:
        main()
    except KeyboardInterrupt:
        print("\n👋 Shutting down Simple Bank...")
    except Exception as e:
        print(f"❌ Error starting application: {e}")
        sys.exit(1)
