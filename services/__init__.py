# -*- coding: utf-8 -*-
"""
Storefront Services Layer
"""
