"""Runtime request pipeline."""
