"""Roll Call package.

A thin Flask layer over a hosted Supabase backend: operators sign in, pick a
division and mark enrollment numbers present or absent. Organised by feature
modules (users, attendance) with service/repository layers behind the
controllers.
"""
