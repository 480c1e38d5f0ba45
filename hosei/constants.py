"""Constants for hosei inference."""

# 補正比率を整数化する固定小数点スケール（小数4桁、切り捨て）
FIXED_POINT_SCALE = 10_000

# 選ばれた因数をbase補正値に戻す除数（残りの ÷100）
BASE_HOSEI_DIVISOR = 100

# 補正レコードの初期値（恒等倍率）
IDENTITY_HOSEI = 1.0
