# -*- coding: utf-8 -*-
"""Daily nutrition goals."""
