# -*- coding: utf-8 -*-
"""Meals and the foods logged with them."""
