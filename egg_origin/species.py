"""
species – National Pokédex ids referenced by the breeding rules.

Only the species the egg rules, the reference evolution table and the
form table name are listed; every other species is handled by its raw id.
"""

from __future__ import annotations

from enum import IntEnum


class Species(IntEnum):
    # ── Gen 1 ──
    Bulbasaur = 1
    Ivysaur = 2
    Venusaur = 3
    Charmander = 4
    Charmeleon = 5
    Charizard = 6
    Pidgey = 16
    Pidgeotto = 17
    Rattata = 19
    Raticate = 20
    Pikachu = 25
    Raichu = 26
    Sandshrew = 27
    Vulpix = 37
    Clefairy = 35
    Jigglypuff = 39
    Meowth = 52
    Geodude = 74
    Graveler = 75
    Golem = 76
    Ponyta = 77
    Slowpoke = 79
    Farfetchd = 83
    Grimer = 88
    Cubone = 104
    Marowak = 105
    Hitmonlee = 106
    Hitmonchan = 107
    Chansey = 113
    MrMime = 122
    Jynx = 124
    Electabuzz = 125
    Magmar = 126
    Ditto = 132
    Eevee = 133
    Snorlax = 143
    Articuno = 144
    Zapdos = 145
    Moltres = 146
    Mewtwo = 150
    Mew = 151

    # ── Gen 2 ──
    Pichu = 172
    Cleffa = 173
    Igglybuff = 174
    Marill = 183
    Azumarill = 184
    Sudowoodo = 185
    Unown = 201
    Wobbuffet = 202
    Tyrogue = 236
    Smoochum = 238
    Elekid = 239
    Magby = 240
    Mantine = 226
    Corsola = 222
    Blissey = 242
    Hitmontop = 237
    Raikou = 243
    Entei = 244
    Suicune = 245
    Lugia = 249
    HoOh = 250
    Celebi = 251

    # ── Gen 3 ──
    Zigzagoon = 263
    Nincada = 290
    Ninjask = 291
    Shedinja = 292
    Azurill = 298
    Roselia = 315
    Castform = 351
    Chimecho = 358
    Wynaut = 360
    Regirock = 377
    Regice = 378
    Registeel = 379
    Latias = 380
    Latios = 381
    Kyogre = 382
    Groudon = 383
    Rayquaza = 384
    Jirachi = 385
    Deoxys = 386

    # ── Gen 4 ──
    Budew = 406
    Roserade = 407
    Chingling = 433
    Bonsly = 438
    MimeJr = 439
    Happiny = 440
    Munchlax = 446
    Mantyke = 458
    Rotom = 479
    Uxie = 480
    Mesprit = 481
    Azelf = 482
    Dialga = 483
    Palkia = 484
    Heatran = 485
    Regigigas = 486
    Giratina = 487
    Cresselia = 488
    Phione = 489
    Manaphy = 490
    Darkrai = 491
    Shaymin = 492
    Arceus = 493

    # ── Gen 5 ──
    Victini = 494
    Darumaka = 554
    Yamask = 562
    Stunfisk = 618
    Cobalion = 638
    Terrakion = 639
    Virizion = 640
    Tornadus = 641
    Thundurus = 642
    Reshiram = 643
    Zekrom = 644
    Landorus = 645
    Kyurem = 646
    Keldeo = 647
    Meloetta = 648
    Genesect = 649

    # ── Gen 6 ──
    Vivillon = 666
    Flabebe = 669
    Xerneas = 716
    Yveltal = 717
    Zygarde = 718
    Diancie = 719
    Hoopa = 720
    Volcanion = 721

    # ── Gen 7 ──
    Gumshoos = 735
    Vikavolt = 738
    Ribombee = 743
    Araquanid = 752
    Lurantis = 754
    Salazzle = 758
    TypeNull = 772
    Silvally = 773
    TapuKoko = 785
    TapuLele = 786
    TapuBulu = 787
    TapuFini = 788
    Cosmog = 789
    Cosmoem = 790
    Solgaleo = 791
    Lunala = 792
    Nihilego = 793
    Buzzwole = 794
    Pheromosa = 795
    Xurkitree = 796
    Celesteela = 797
    Kartana = 798
    Guzzlord = 799
    Necrozma = 800
    Magearna = 801
    Marshadow = 802
    Poipole = 803
    Naganadel = 804
    Stakataka = 805
    Blacephalon = 806
    Zeraora = 807
    Meltan = 808
    Melmetal = 809
    Togedemaru = 777
    Mimikyu = 778
    Kommoo = 784

    # ── Gen 8 ──
    Sinistea = 854
    Polteageist = 855
    MrRime = 866
    Dracozolt = 880
    Arctozolt = 881
    Dracovish = 882
    Arctovish = 883
    Zacian = 888
    Zamazenta = 889
    Eternatus = 890
    Kubfu = 891
    Urshifu = 892
    Zarude = 893
    Regieleki = 894
    Regidrago = 895
    Glastrier = 896
    Spectrier = 897
    Calyrex = 898
