#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Execução direta, sem instalar o pacote:
#   python main.py "https://www.youtube.com/playlist?list=PL..."
import sys

from tube_ls.cli import main

if __name__ == "__main__":
    sys.exit(main())
