# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：main.py
# @Date   ：2026/10/14 15:05
# @Author ：leemysw
#
# 2026/10/14 15:05   Create
# =====================================================

from wecom_api.cli.main import app

if __name__ == '__main__':
    app()
