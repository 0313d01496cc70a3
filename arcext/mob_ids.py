"""Species ids of encounter targets and of the trash mobs around them."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["TargetID", "TrashID"]


class TargetID(IntEnum):
    """Species ids of bosses and other main encounter targets."""

    MORDREMOTH = 15884
    # Raids
    VALE_GUARDIAN = 15438
    GORSEVAL = 15429
    SABETHA = 15375
    SLOTHASOR = 16123
    BERG = 16088
    ZANE = 16137
    NARELLA = 16125
    MATTHIAS = 16115
    ESCORT = 16253
    KEEP_CONSTRUCT = 16235
    XERA = 16246
    CAIRN = 17194
    MURSAAT_OVERSEER = 17172
    SAMAROG = 17188
    DEIMOS = 17154
    SOULLESS_HORROR = 19767
    DESMINA = 19828
    BROKEN_KING = 19691
    SOUL_EATER = 19536
    EYE_OF_JUDGEMENT = 19651
    EYE_OF_FATE = 19844
    DHUUM = 19450
    CONJURED_AMALGAMATE = 43974
    CA_RIGHT_ARM = 10142
    CA_LEFT_ARM = 37464
    CONJURED_AMALGAMATE_CHINA = 44885
    CA_RIGHT_ARM_CHINA = 11053
    CA_LEFT_ARM_CHINA = 38375
    NIKARE = 21105
    KENUT = 21089
    QADIM = 20934
    FREEZIE = 21333
    ADINA = 22006
    SABIR = 21964
    PEERLESS_QADIM = 22000
    # Strike missions
    ICEBROOD_CONSTRUCT = 22154
    VOICE_OF_THE_FALLEN = 22343
    CLAW_OF_THE_FALLEN = 22481
    VOICE_AND_CLAW = 22315
    FRAENIR_OF_JORMAG = 22492
    ICEBROOD_CONSTRUCT_FRAENIR = 22436
    BONESKINNER = 22521
    WHISPER_OF_JORMAG = 22711
    VARINIA_STORMSOUNDER = 22836
    MAI_TRIN_STRIKE = 24033
    ECHO_OF_SCARLET_BRIAR_NM = 24768
    ECHO_OF_SCARLET_BRIAR_CM = 25247
    ANKKA = 23957
    MINISTER_LI = 24485
    MINISTER_LI_CM = 24266
    GADGET_THE_DRAGON_VOID1 = 43488
    GADGET_THE_DRAGON_VOID2 = 1378
    VOID_AMALGAMATE1 = 24375
    PROTOTYPE_VERMILION = 25413
    PROTOTYPE_ARSENITE = 25415
    PROTOTYPE_INDIGO = 25419
    PROTOTYPE_VERMILION_CM = 25414
    PROTOTYPE_ARSENITE_CM = 25416
    PROTOTYPE_INDIGO_CM = 25423
    # Fractals
    MAMA = 17021
    SIAX = 17028
    ENSOLYSS = 16948
    SKORVALD = 17632
    ARTSARIIV = 17949
    ARKK = 17759
    MAI_TRIN_FRACT = 19697
    SHADOW_MINOTAUR = 20682
    BROOD_QUEEN = 20742
    THE_VOICE = 20497
    AI_KEEPER_OF_THE_PEAK = 23254
    # Golems
    MASSIVE_GOLEM_10M = 16169
    MASSIVE_GOLEM_4M = 16202
    MASSIVE_GOLEM_1M = 16178
    VITAL_GOLEM = 16198
    AVG_GOLEM = 16177
    STD_GOLEM = 16199
    L_GOLEM = 19676
    MED_GOLEM = 19645
    CONDITION_GOLEM = 16174
    POWER_GOLEM = 16176
    # Open world
    SOO_WON_OW = 35552


class TrashID(IntEnum):
    """Species ids of adds and other non-target mobs in encounters."""

    # Mordremoth
    SMOTHERING_SHADOW = 15640
    CANACH = 15501
    BRAHAM = 15778
    CAITHE = 15565
    BLIGHTED_RYTLOCK = 15999
    BLIGHTED_BRAHAM = 15553
    BLIGHTED_MARJORY = 15572
    BLIGHTED_CAITHE = 15916
    BLIGHTED_FORGAL = 15597
    BLIGHTED_SIERAN = 15979
    # Vale Guardian
    SEEKERS = 15426
    RED_GUARDIAN = 15433
    BLUE_GUARDIAN = 15431
    GREEN_GUARDIAN = 15420
    # Gorseval
    CHARGED_SOUL = 15434
    ENRAGED_SPIRIT = 16024
    ANGERED_SPIRIT = 16005
    # Sabetha
    KERNAN = 15372
    KNUCKLES = 15404
    KARDE = 15430
    BANDIT_SAPPER = 15423
    BANDIT_THUG = 15397
    BANDIT_ARSONIST = 15421
    # Slothasor
    SLUBLING1 = 16064
    SLUBLING2 = 16071
    SLUBLING3 = 16077
    SLUBLING4 = 16104
    # Bandit trio
    BANDIT_SABOTEUR = 16117
    WARG = 7481
    CAGED_WARG = 16129
    BANDIT_ASSASSIN = 16067
    BANDIT_SAPPER_TRIO = 16074
    BANDIT_DEATHSAYER = 16076
    BANDIT_BRAWLER = 16066
    BANDIT_BATTLEMAGE = 16093
    BANDIT_CLERIC = 16101
    BANDIT_BOMBARDIER = 16138
    BANDIT_SNIPER = 16065
    NARELLA_TORNADO = 16092
    OIL_SLICK = 16096
    PRISONER1 = 16056
    PRISONER2 = 16103
    # Matthias
    SPIRIT = 16105
    SPIRIT2 = 16114
    ICE_PATCH = 16139
    STORM = 16108
    TORNADO = 16068
    # Keep Construct
    OLSON = 16244
    ENGUL = 16274
    FAERLA = 16264
    CAULLE = 16282
    HENLEY = 16236
    JESSICA = 16278
    GALLETTA = 16228
    IANIM = 16248
    KEEP_CONSTRUCT_CORE = 16261
    GREEN_PHANTASM = 16237
    INSIDIOUS_PROJECTION = 16227
    UNSTABLE_LEY_RIFT = 16277
    RADIANT_PHANTASM = 16259
    CRIMSON_PHANTASM = 16257
    RETRIEVER_PROJECTION = 16249
    # Twisted Castle
    HAUNTING_STATUE = 16247
    # Xera
    XERAS_PHANTASM = 16225
    WHITE_MANTLE_SEEKER1 = 16238
    WHITE_MANTLE_SEEKER2 = 16283
    WHITE_MANTLE_KNIGHT1 = 16251
    WHITE_MANTLE_KNIGHT2 = 16287
    WHITE_MANTLE_BATTLE_MAGE1 = 16221
    WHITE_MANTLE_BATTLE_MAGE2 = 16226
    EXQUISITE_CONJUNCTION = 16232
    # Mursaat Overseer
    JADE = 17181
    # Samarog
    GULDHEM = 17208
    RIGOM = 17124
    # Deimos
    SAUL = 17126
    THIEF = 17206
    GAMBLER = 17335
    GAMBLER_CLONES = 17161
    GAMBLER_REAL = 17355
    DRUNKARD = 17163
    OIL = 17332
    TEAR = 17303
    GREED = 17213
    PRIDE = 17233
    HANDS = 17221
    # Soulless Horror
    TORMENTED_DEAD = 19422
    SURGING_SOUL = 19474
    SCYTHE = 19396
    FLESH_WURM = 19464
    # River of Souls
    ENERVATOR = 19863
    HOLLOWED_BOMBER = 19399
    RIVER_OF_SOULS = 19829
    SPIRIT_HORDE1 = 19461
    SPIRIT_HORDE2 = 19400
    SPIRIT_HORDE3 = 19692
    # Statues of Darkness
    LIGHT_THIEVES = 19658
    MAZE_MINOTAUR = 19402
    # Statue of Death
    ORB_SPIDER = 19801
    GREEN_SPIRIT1 = 19587
    GREEN_SPIRIT2 = 19571
    # Dhuum
    MESSENGER = 19807
    ECHO = 19628
    ENFORCER = 19681
    DEATHLING = 19759
    UNDERWORLD_REAPER = 19831
    DHUUM_DESMINA = 19481
    # Conjured Amalgamate
    CONJURED_GREATSWORD = 21255
    CONJURED_SHIELD = 21170
    # Qadim
    LAVA_ELEMENTAL1 = 21236
    LAVA_ELEMENTAL2 = 21078
    ICEBORN_HYDRA = 21163
    GREATER_MAGMA_ELEMENTAL1 = 21150
    GREATER_MAGMA_ELEMENTAL2 = 21223
    FIRE_ELEMENTAL = 21221
    FIRE_IMP = 21100
    PYRE_GUARDIAN = 21050
    REAPER_OF_FLESH = 21218
    DESTROYER_TROLL = 20944
    ICE_ELEMENTAL = 21049
    ANCIENT_INVOKED_HYDRA = 21285
    APOCALYPSE_BRINGER = 21073
    WYVERN_MATRIARCH = 20997
    WYVERN_PATRIARCH = 21183
    ZOMMOROS = 20961
    # Sabir
    PARALYZING_WISP = 21955
    VOLTAIC_WISP = 21975
    SMALL_JUMPY_TORNADO = 21961
    SMALL_KILLER_TORNADO = 21957
    BIG_KILLER_TORNADO = 21987
    # Peerless Qadim
    PYLON1 = 21996
    PYLON2 = 21962
    ENTROPIC_DISTORTION = 21973
    ENERGY_ORB = 21946
    # Fraenir
    ICEBROOD_ELEMENTAL = 22576
    # Boneskinner
    PRIORY_EXPLORER = 22561
    PRIORY_SCHOLAR = 22448
    VIGIL_RECRUIT = 22389
    VIGIL_TACTICIAN = 22420
    ABERRANT_WISP = 22538
    # Whisper of Jormag
    WHISPER_ECHO = 22628
    # Cold War
    PROPAGANDA_BALLON = 23093
    DOMINION_BLADESTORM = 23102
    DOMINION_STALKER = 22882
    DOMINION_SPY1 = 22833
    DOMINION_SPY2 = 22856
    DOMINION_AXE_FIEND = 22938
    DOMINION_EFFIGY = 22897
    FROST_LEGION_CRUSHER = 23005
    FROST_LEGION_MUSKETEER = 22870
    BLOOD_LEGION_BLADEMASTER = 22993
    CHARR_TANK = 22953
    SONS_OF_SVANIR_HIGH_SHAMAN = 22283
    DOPPELGANGER_NECRO = 22713
    DOPPELGANGER_WARRIOR = 22640
    DOPPELGANGER_GUARDIAN1 = 22635
    DOPPELGANGER_GUARDIAN2 = 22608
    DOPPELGANGER_THIEF1 = 22656
    DOPPELGANGER_THIEF2 = 22612
    DOPPELGANGER_REVENANT = 22610
    # Aetherblade Hideout
    MAI_TRIN_STRIKE_DURING_ECHO = 23826
    SCARLET_PHANTOM1 = 24404
    SCARLET_PHANTOM_BREAKBAR = 23656
    SCARLET_PHANTOM_HP = 24431
    SCARLET_PHANTOM_HP2 = 25262
    SCARLET_PHANTOM2 = 24396
    # Xunlai Jade Junkyard
    ANKKA = 24634
    ANKKA_HALLUCINATION1 = 24258
    ANKKA_HALLUCINATION2 = 24158
    ANKKA_HALLUCINATION3 = 24969
    REANIMATED_SPITE = 24348
    REANIMATED_MALICE1 = 24976
    REANIMATED_MALICE2 = 24171
    ZHAITANS_REACH = 23839
    REANIMATED_HATRED = 23673
    # Kaineng Overlook
    THE_SNIPER = 23612
    THE_SNIPER_CM = 25259
    THE_MECH_RIDER = 24660
    THE_MECH_RIDER_CM = 25271
    THE_ENFORCER = 24261
    THE_ENFORCER_CM = 25236
    THE_RITUALIST = 23618
    THE_RITUALIST_CM = 25242
    THE_MINDBLADE = 24254
    THE_MINDBLADE_CM = 25280
    SPIRIT_OF_PAIN = 23793
    SPIRIT_OF_DESTRUCTION = 23961
    # Void Amalgamate
    VOID_AMALGAMATE = 24375
    KILLABLE_VOID_AMALGAMATE = 23956
    VOID_TANGLER = 25138
    VOID_COLDSTEEL = 23945
    VOID_ABOMINATION = 23936
    VOID_SALTSPRAY_DRAGON = 23846
    VOID_OBLITERATOR = 23995
    VOID_ROTSWARMER = 24590
    VOID_GIANT = 24450
    VOID_SKULLPIERCER = 25177
    VOID_TIME_CASTER = 25025
    VOID_BRANDBOMBER = 24783
    VOID_BURSTER = 24464
    VOID_WARFORGED1 = 24129
    VOID_WARFORGED2 = 24855
    VOID_STORMSEER = 24677
    VOID_MELTER = 24223
    VOID_GOLIATH = 24761
    # Freezie
    FREEZIES_FROZEN_HEART = 21328
    # Fractals
    FRACTAL_VINDICATOR = 19684
    FRACTAL_AVENGER = 15960
    # MAMA
    GREEN_KNIGHT = 16906
    RED_KNIGHT = 16974
    BLUE_KNIGHT = 16899
    TWISTED_HORROR = 17009
    # Siax
    SIAX_HALLUCINATION = 17002
    ECHO_OF_THE_UNCLEAN = 17068
    NIGHTMARE_HALLUCINATION_SIAX = 16911
    # Ensolyss
    NIGHTMARE_HALLUCINATION1 = 16912
    NIGHTMARE_HALLUCINATION2 = 17033
    # Skorvald
    FLUX_ANOMALY4 = 17673
    FLUX_ANOMALY3 = 17851
    FLUX_ANOMALY2 = 17770
    FLUX_ANOMALY1 = 17599
    SOLAR_BLOOM = 17732
    # Artsariiv
    TEMPORAL_ANOMALY = 17870
    SPARK = 17630
    SMALL_ARTSARIIV = 17811
    MEDIUM_ARTSARIIV = 17694
    BIG_ARTSARIIV = 17937
    # Arkk
    TEMPORAL_ANOMALY2 = 17720
    ARCHDIVINER = 17893
    FANATIC = 11282
    BRAZEN_GLADIATOR = 17730
    BLIGHT = 16437
    PLINK = 16325
    DOC = 16657
    CHOP = 16552
    PROJECTION_ARKK = 17613
    # Ai, Keeper of the Peak
    ENRAGE_WATER_SPRITE = 23270
    SORROW_DEMON1 = 23265
    SORROW_DEMON2 = 23242
    SORROW_DEMON3 = 23279
    SORROW_DEMON4 = 23245
    SORROW_DEMON5 = 23256
    DOUBT_DEMON = 23268
    FEAR_DEMON = 23264
    GUILT_DEMON = 23252
    # Open world Soo-Won
    SOO_WON_TAIL = 51756
    VOID_GIANT2 = 24310
    VOID_TIME_CASTER2 = 24586
    VOID_BRANDSTALKER = 24951
    VOID_COLDSTEEL2 = 23791
    VOID_OBLITERATOR2 = 24947
    VOID_ABOMINATION2 = 23886
    VOID_BOMBER = 24714
    VOID_BRANDBEAST = 23917
    VOID_BRANDCHARGER1 = 24936
    VOID_BRANDCHARGER2 = 24039
    VOID_BRANDFANG1 = 24912
    VOID_BRANDFANG2 = 24772
    VOID_BRANDSCALE1 = 24053
    VOID_BRANDSCALE2 = 24426
    VOID_COLDSTEEL3 = 24063
    VOID_CORPSEKNITTER1 = 24756
    VOID_CORPSEKNITTER2 = 24607
    VOID_DESPOILER1 = 23874
    VOID_DESPOILER2 = 25179
    VOID_FIEND1 = 23707
    VOID_FIEND2 = 24737
    VOID_FOULMAW = 24766
    VOID_FROSTWING = 24780
    VOID_GLACIER1 = 23753
    VOID_GLACIER2 = 24235
    VOID_INFESTED1 = 24390
    VOID_INFESTED2 = 24997
    VOID_MELTER1 = 24497
    VOID_MELTER2 = 24807
    VOID_RIMEWOLF1 = 24698
    VOID_RIMEWOLF2 = 23798
    VOID_ROTSPINNER1 = 25057
    VOID_STORM = 24007
    VOID_STORMSEER2 = 24419
    VOID_STORMSEER3 = 23962
    VOID_TANGLER2 = 23567
    VOID_THORNHEART1 = 24406
    VOID_THORNHEART2 = 23688
    VOID_WORM = 23701