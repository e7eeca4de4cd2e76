# workerhub/utils/geo.py
# 距離計算與「由近到遠」排序，搭配資料庫的經緯度範圍預先篩選
import math
from typing import Any, Dict, List, NamedTuple, Optional

# 與 MongoDB 球面查詢相同的地球半徑 (公尺)
EARTH_RADIUS_M = 6378100.0


class BoundingBox(NamedTuple):
    min_lat: float
    max_lat: float
    # 跨越國際換日線或包含極點時為 None，代表不限制經度
    min_lon: Optional[float]
    max_lon: Optional[float]


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    兩點間的大圓距離 (公尺)
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # 浮點誤差可能讓 a 略大於 1
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(a))


def bounding_box(latitude: float, longitude: float, radius_m: float) -> BoundingBox:
    """
    計算包住「以 (latitude, longitude) 為圓心、radius_m 為半徑」的經緯度矩形。
    只用於資料庫的預先篩選，實際距離仍由 haversine_distance 判斷。
    """
    angular = radius_m / EARTH_RADIUS_M
    d_lat = math.degrees(angular)
    min_lat = latitude - d_lat
    max_lat = latitude + d_lat

    # 圓包含極點：緯度夾到邊界，經度不限制
    if min_lat <= -90 or max_lat >= 90:
        return BoundingBox(max(min_lat, -90.0), min(max_lat, 90.0), None, None)

    ratio = math.sin(angular) / math.cos(math.radians(latitude))
    if ratio >= 1:
        return BoundingBox(min_lat, max_lat, None, None)

    d_lon = math.degrees(math.asin(ratio))
    min_lon = longitude - d_lon
    max_lon = longitude + d_lon

    # 跨越 ±180 度，單一 BETWEEN 無法表達，改為不限制經度
    if min_lon < -180 or max_lon > 180:
        return BoundingBox(min_lat, max_lat, None, None)

    return BoundingBox(min_lat, max_lat, min_lon, max_lon)


def rank_by_distance(
    latitude: float,
    longitude: float,
    items: List[Any],
    max_distance_m: float
) -> List[Dict]:
    """
    過濾出距離在 max_distance_m 內的項目，並依距離由近到遠排序。

    items 需具備 latitude / longitude 屬性 (e.g. Worker ORM 物件)。
    回傳 [{"item_object": ..., "distance": 公尺}, ...]
    """
    ranked = []
    for item in items:
        distance = haversine_distance(latitude, longitude, item.latitude, item.longitude)
        if distance <= max_distance_m:
            ranked.append({"item_object": item, "distance": distance})

    # 主要排序鍵：距離 (近到遠)；同距離保持資料庫回傳順序
    ranked.sort(key=lambda x: x["distance"])
    return ranked
