#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Render an invoice JSON file to a one-page PDF.
"""

import invoice_pdf_templates.cli


if __name__ == "__main__":
	invoice_pdf_templates.cli.main()
