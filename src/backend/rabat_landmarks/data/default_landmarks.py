# rabat_landmarks/data/default_landmarks.py
# 初回起動時にストアへ登録するラバトの観光地．登録順がそのままid順になる．

def _scene(camera_z: float = 5, light_intensity: float = 1.0, environment_map: str = "day") -> dict:
    return {
        "cameraPosition": {"x": 0, "y": 1.6, "z": camera_z},
        "lightIntensity": light_intensity,
        "environmentMap": environment_map,
    }

DEFAULT_LANDMARKS: list[dict] = [
    {
        "name": "Hassan Tower",
        "slug": "hassan-tower",
        "description": "The Hassan Tower is a minaret of an incomplete mosque in Rabat. Commissioned by Abu Yusuf Yaqub al-Mansur, the third Caliph of the Almohad Caliphate, the tower was intended to be the largest minaret in the world. The tower reached a height of 44 m, about half of its intended 86 m height.",
        "short_description": "Iconic 12th-century minaret of an incomplete mosque, standing as a symbol of Rabat.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/e/e3/Tour_Hassan_Rabat.jpg/1280px-Tour_Hassan_Rabat.jpg",
        "location": "Avenue Hassan II, Rabat",
        "opening_hours": "8:00 AM - 6:00 PM",
        "latitude": "34.0242",
        "longitude": "-6.8210",
        "vr_model_url": "/vr/hassan-tower.gltf",
        "vr_scene_config": _scene(),
    },
    {
        "name": "Chellah Necropolis",
        "slug": "chellah",
        "description": "Chellah is a medieval fortified Muslim necropolis located in the metro area of Rabat. The Phoenicians established a trading emporium at the site. Later, the site was occupied by Carthaginians, then by Romans who built their own city, Sala Colonia. The ruins of their walled town contain a forum, a triumphal arch, a decumanus maximus, a cardo, a capitoline temple, a crafts district, and a residential district.",
        "short_description": "Ancient Roman ruins and medieval Muslim necropolis with beautiful gardens and storks nesting on the minaret.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/5/5b/Morocco_Africa_Flickr_Rosino_December_2005_84514010.jpg/1280px-Morocco_Africa_Flickr_Rosino_December_2005_84514010.jpg",
        "location": "Avenue Al Marinyeen, Rabat",
        "opening_hours": "9:00 AM - 5:30 PM",
        "latitude": "34.0047",
        "longitude": "-6.8146",
        "vr_model_url": "/vr/chellah.gltf",
        "vr_scene_config": _scene(),
    },
    {
        "name": "Kasbah of the Udayas",
        "slug": "kasbah-oudaya",
        "description": "The Kasbah of the Udayas is a kasbah in Rabat. It was built during the reign of the Almohads. The edifice was originally built in the 12th century and renovated multiple times after that. The kasbah was listed as a UNESCO World Heritage Site in 2012.",
        "short_description": "Ancient fortress with blue and white painted streets, Andalusian Gardens, and amazing views of the ocean.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/8/8a/Rabat_Kasbah_des_Oudaias.jpg/1280px-Rabat_Kasbah_des_Oudaias.jpg",
        "location": "Rue El Marsa, Rabat",
        "opening_hours": "8:00 AM - 6:00 PM",
        "latitude": "34.0346",
        "longitude": "-6.8363",
        "vr_model_url": "/vr/kasbah-oudaya.gltf",
        "vr_scene_config": _scene(),
    },
    {
        "name": "Mohammed V Mausoleum",
        "slug": "mohammed-v-mausoleum",
        "description": "The Mausoleum of Mohammed V is a historical building located opposite the Hassan Tower on the Yacoub al-Mansour esplanade in Rabat. It contains the tombs of the Moroccan king Mohammed V and his sons, King Hassan II and Prince Abdallah. The building is considered a masterpiece of modern Alaouite dynasty architecture, with its white silhouette, topped by a typical green tiled roof.",
        "short_description": "Ornate mausoleum of King Mohammed V with beautiful Moroccan craftsmanship and Royal Guards.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/f/f7/MohammedVMausoleum.jpg/1280px-MohammedVMausoleum.jpg",
        "location": "Boulevard Abi Regreg, Rabat",
        "opening_hours": "9:00 AM - 6:00 PM",
        "latitude": "34.0245",
        "longitude": "-6.8213",
        "vr_model_url": "/vr/mohammed-v-mausoleum.gltf",
        "vr_scene_config": _scene(light_intensity=0.8, environment_map="indoor"),
    },
    {
        "name": "Rabat Medina",
        "slug": "rabat-medina",
        "description": "The Rabat Medina, or old city, is a charming area filled with narrow, maze-like streets lined with shops selling traditional Moroccan goods. Unlike some other Moroccan medinas, Rabat's is relatively uncrowded and relaxed, making it a pleasant place to explore. The medina is surrounded by 17th-century Andalusian walls and contains the Great Mosque, various souks, and traditional residential areas.",
        "short_description": "Historic walled old city with markets, traditional shops, and authentic Moroccan atmosphere.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/d/df/Medina_of_Rabat_-_Morocco.jpg/1280px-Medina_of_Rabat_-_Morocco.jpg",
        "location": "Medina, Rabat",
        "opening_hours": "Open 24 hours",
        "latitude": "34.0253",
        "longitude": "-6.8407",
        "vr_model_url": "/vr/rabat-medina.gltf",
        "vr_scene_config": _scene(camera_z=0), # 路地の中から始める
    },
    {
        "name": "Andalusian Gardens",
        "slug": "andalusian-gardens",
        "description": "The Andalusian Gardens are located inside the Kasbah of the Udayas. These lush gardens were created by the French during the colonial period but designed in a traditional Andalusian style with fountains, orange trees, colorful flowers, and decorative tiled paths. The gardens offer a peaceful retreat from the bustling city and beautiful views of the Bou Regreg River.",
        "short_description": "Peaceful garden with fountains, exotic plants, and Spanish-Moorish design within the Kasbah.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/b/bd/Rabat_Kasbah_Andalusian_Gardens.jpg/1280px-Rabat_Kasbah_Andalusian_Gardens.jpg",
        "location": "Inside Kasbah of the Udayas, Rabat",
        "opening_hours": "8:00 AM - 6:00 PM",
        "latitude": "34.0339",
        "longitude": "-6.8367",
        "vr_model_url": "/vr/andalusian-gardens.gltf",
        "vr_scene_config": _scene(),
    },
    {
        "name": "Rabat Archaeological Museum",
        "slug": "rabat-archaeological-museum",
        "description": "The Rabat Archaeological Museum is one of the most important museums in Morocco. It houses an extensive collection of archaeological artifacts from various prehistoric and historic periods of Morocco's history. The collections include items from Volubilis, Banasa, and Thamusida, as well as finds from archaeological research in Rabat. The museum is particularly known for its fine collection of bronzes and marble sculptures from the Roman era.",
        "short_description": "Important museum with pre-Roman and Roman artifacts including the famous Volubilis bronzes.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/d/db/Mus%C3%A9e_arch%C3%A9ologique_de_Rabat_01.jpg/1280px-Mus%C3%A9e_arch%C3%A9ologique_de_Rabat_01.jpg",
        "location": "Rue Brihi, Rabat",
        "opening_hours": "10:00 AM - 5:00 PM, Closed on Tuesdays",
        "latitude": "34.0098",
        "longitude": "-6.8364",
        "vr_model_url": "/vr/rabat-archaeological-museum.gltf",
        "vr_scene_config": _scene(light_intensity=0.7, environment_map="indoor"),
    },
    {
        "name": "Royal Palace of Rabat",
        "slug": "royal-palace",
        "description": "The Royal Palace of Rabat, or Dar al-Makhzen, is the official residence of the King of Morocco. While the palace itself is not open to the public, visitors can admire its impressive entrance and watch the Royal Guard. The palace complex includes a mosque, a college, and extensive gardens. The palace was built in 1864 and has been expanded and renovated over the years. Its architecture combines traditional Moroccan elements with modern features.",
        "short_description": "Official residence of the King with impressive facades, Royal Guards, and beautiful surroundings.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/f/f7/Palais_Royal_Rabat.jpg/1280px-Palais_Royal_Rabat.jpg",
        "location": "Avenue Mohammed V, Rabat",
        "opening_hours": "External viewing only",
        "latitude": "34.0147",
        "longitude": "-6.8303",
        "vr_model_url": "/vr/royal-palace.gltf",
        "vr_scene_config": _scene(camera_z=10), # 外観のみなので引きで見せる
    },
    {
        "name": "Salé Medina",
        "slug": "sale-medina",
        "description": "The Salé Medina is located in Rabat's sister city of Salé, just across the Bou Regreg River. This traditional walled medina is less visited by tourists than Rabat's medina, offering a more authentic experience. It features the Great Mosque of Salé (built in the 12th century), the Medersa (14th-century Islamic school), traditional souks, and the Bab Mrisa, a monumental gate facing the river.",
        "short_description": "Traditional walled old city across the river from Rabat with authentic markets and historic architecture.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/5/5e/Bab_Mrisa_Sale.jpg/1280px-Bab_Mrisa_Sale.jpg",
        "location": "Salé, Rabat-Salé-Kénitra",
        "opening_hours": "Open 24 hours",
        "latitude": "34.0378",
        "longitude": "-6.8165",
        "vr_model_url": "/vr/sale-medina.gltf",
        "vr_scene_config": _scene(),
    },
    {
        "name": "Bab Rouah",
        "slug": "bab-rouah",
        "description": "Bab Rouah, which means 'Gate of the Winds', is one of the most beautiful monumental gates of Rabat's city walls. Built in the 12th century during the Almohad era, it is considered a masterpiece of Almohad architecture. Today, the interior of the gate houses an art gallery where temporary exhibitions are often held. The gate is characterized by its horseshoe arches and intricate decorative carvings.",
        "short_description": "Imposing 12th-century city gate with beautiful Almohad architecture, now functioning as an art gallery.",
        "image_url": "https://upload.wikimedia.org/wikipedia/commons/thumb/7/7d/Bab_Rouah.jpg/1280px-Bab_Rouah.jpg",
        "location": "Avenue Al Marinyeen, Rabat",
        "opening_hours": "9:00 AM - 5:00 PM, Closed on Mondays",
        "latitude": "34.0122",
        "longitude": "-6.8365",
        "vr_model_url": "/vr/bab-rouah.gltf",
        "vr_scene_config": _scene(),
    },
]
