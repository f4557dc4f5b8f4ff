WHITE = (230, 230, 235)
GREY = (140, 140, 150)
CYAN = (80, 220, 230)
GREEN = (90, 220, 120)
AMBER = (255, 190, 60)
RED = (240, 70, 70)
