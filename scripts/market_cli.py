#!/usr/bin/env python3
# PURPOSE: Simple command-line interface to browse the synthetic market locally.
# CONTEXT: Lets you exercise quotes, analyses and the portfolio without deploying the handler.
#
# Commands:
#   <SYMBOL>            full stock analysis (e.g. TCS)
#   quote <SYMBOL>      today's quote
#   search <text>       company search (3+ characters)
#   movers              today's top gainers / losers
#   portfolio           default portfolio snapshot

import json, sys
from src.lambda_handler import handler

print("StockAI CLI — type a symbol or a command and press Enter. Ctrl+C to exit.")

while True:
    try:
        text = input("> ").strip()
        if not text:
            continue
        cmd, _, arg = text.partition(" ")
        cmd = cmd.lower()

        # Build the same request body the deployed handler would receive.
        if cmd == "quote":
            payload = {"action": "quote", "symbol": arg.upper()}
        elif cmd == "search":
            payload = {"action": "search", "query": arg}
        elif cmd == "movers":
            payload = {"action": "movers"}
        elif cmd == "portfolio":
            payload = {"action": "portfolio"}
        else:
            payload = {"action": "analysis", "symbol": text.upper()}

        resp = handler({"body": json.dumps(payload)})
        print(json.dumps(json.loads(resp["body"]), indent=2, ensure_ascii=False))

    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        sys.exit(0)
