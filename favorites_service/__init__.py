"""Сервис избранного: пользователи, продукты и их избранное."""
